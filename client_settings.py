# ==========================================
# ⚙️ CLIENT CONFIGURATION FILE
# ==========================================
# Edit this file to re-brand the app. Secrets (Supabase URL/key, ADMIN_PASS)
# live in .streamlit/secrets.toml, never here.

# --- BRANDING ---
APP_TITLE = "LexForms | Documentos Legales"   # Shows in browser tab
PAGE_ICON = "⚖️"                              # Browser tab icon
CLIENT_NAME = "LexForms"                      # Sidebar header
TAGLINE = "Documentos legales en minutos"

# --- LOGIN ---
LOGIN_HEADER = "Acceso a LexForms"

# --- SCREENS (sidebar order) ---
PAGES = {
    "create": "📝 Crear documento",
    "history": "🗂️ Historial",
    "glossary": "📚 Glosario",
}

# --- ADMIN ---
SHOW_ADMIN_DASHBOARD = True

# --- PDF ---
# Generation is not available yet; buttons show this hint.
PDF_PENDING_HINT = "Generación de PDF próximamente"

# --- DATES ---
# Creation dates are stored in UTC and shown in this zone.
TIMEZONE = "America/Bogota"
