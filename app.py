import streamlit as st

import backend
from config import DOCUMENT_TYPES, get_form_fields, missing_required_fields, type_label
from helpers import escape_markdown, field_value_to_text, filter_terms, history_rows
from logger import log_activity, load_logs

# --- 🔗 IMPORT CLIENT SETTINGS ---
import client_settings as cs

st.set_page_config(page_title=cs.APP_TITLE, page_icon=cs.PAGE_ICON)

# --- STATE INITIALIZATION ---
if "supabase" not in st.session_state: st.session_state.supabase = backend.get_client()
if "user" not in st.session_state: st.session_state.user = None
if "notices" not in st.session_state: st.session_state.notices = []

auth = backend.AuthGateway(st.session_state.supabase)
documents = backend.DocumentStore(st.session_state.supabase)
glossary = backend.GlossaryStore(st.session_state.supabase)


def notify(message, error=False):
    # Callbacks run before the page is drawn, so their toasts wait for the next render.
    st.session_state.notices.append((message, "❌" if error else "✅"))


def field_key(name):
    return f"field_{name}"


def collect_form_data(doc_type):
    form_data = {}
    for field in get_form_fields(doc_type):
        value = st.session_state.get(field_key(field["name"]))
        if value is not None:
            form_data[field["name"]] = field_value_to_text(value)
    return form_data


def reset_form():
    for key in [k for k in st.session_state if k.startswith("field_")]:
        del st.session_state[key]
    if "document_type" in st.session_state:
        del st.session_state["document_type"]


def generate_document():
    doc_type = st.session_state.get("document_type")
    if not doc_type:
        notify("Por favor selecciona un tipo de documento", error=True)
        return

    form_data = collect_form_data(doc_type)
    if missing_required_fields(doc_type, form_data):
        notify("Por favor completa todos los campos obligatorios", error=True)
        return

    try:
        user = auth.require_user()
        documents.create(user.id, doc_type, form_data)
    except backend.BackendError as e:
        log_activity(st.session_state.user["email"], "create", doc_type, "Failed")
        notify(e.message or "Error al generar el documento", error=True)
        return

    log_activity(st.session_state.user["email"], "create", doc_type, "Success")
    notify("Documento generado. La generación del PDF estará disponible pronto.")
    reset_form()


def delete_document(document_id, doc_type):
    try:
        documents.delete(document_id)
    except backend.BackendError as e:
        log_activity(st.session_state.user["email"], "delete", doc_type, "Failed")
        notify(e.message or "Error al eliminar documento", error=True)
        return
    log_activity(st.session_state.user["email"], "delete", doc_type, "Success")
    notify("Documento eliminado")


def sign_out():
    try:
        auth.sign_out()
    except backend.BackendError as e:
        notify(e.message, error=True)
        return
    st.session_state.clear()


# --- PENDING NOTICES ---
while st.session_state.notices:
    message, icon = st.session_state.notices.pop(0)
    st.toast(message, icon=icon)

# --- LOGIN GATE ---
if st.session_state.user is None:
    st.title(f"🔒 {cs.LOGIN_HEADER}")
    st.caption(cs.TAGLINE)
    sign_in_tab, sign_up_tab = st.tabs(["Iniciar sesión", "Registrarse"])

    with sign_in_tab:
        with st.form("sign_in"):
            email = st.text_input("Correo electrónico", key="sign_in_email")
            password = st.text_input("Contraseña", type="password", key="sign_in_password")
            if st.form_submit_button("Entrar"):
                try:
                    user = auth.sign_in(email, password)
                except backend.BackendError as e:
                    st.toast(e.message, icon="❌")
                else:
                    st.session_state.user = {"id": user.id, "email": user.email}
                    st.rerun()

    with sign_up_tab:
        with st.form("sign_up"):
            email = st.text_input("Correo electrónico", key="sign_up_email")
            password = st.text_input("Contraseña", type="password", key="sign_up_password")
            if st.form_submit_button("Crear cuenta"):
                try:
                    auth.sign_up(email, password)
                except backend.BackendError as e:
                    st.toast(e.message, icon="❌")
                else:
                    st.success("Cuenta creada. Revisa tu correo para confirmarla y luego inicia sesión.")
    st.stop()

# --- SIDEBAR ---
with st.sidebar:
    st.header(cs.CLIENT_NAME)
    st.caption(cs.TAGLINE)
    st.write(f"👤 {st.session_state.user['email']}")
    st.button("Cerrar sesión", key="sign_out", on_click=sign_out)
    page = st.radio("Ir a", list(cs.PAGES), format_func=cs.PAGES.get, key="page")

    if cs.SHOW_ADMIN_DASHBOARD:
        with st.expander("💼 Admin Dashboard"):
            admin_pass = st.text_input("Admin Pass", type="password", key="admin_pass")
            if admin_pass and admin_pass == st.secrets.get("ADMIN_PASS"):
                st.dataframe(load_logs())

# ==========================================
# SCREEN 1: CREATE DOCUMENT
# ==========================================
if page == "create":
    st.title("📝 Crear Documento Legal")
    st.caption("Completa el formulario para generar tu documento automáticamente")

    doc_type = st.selectbox(
        "Tipo de Documento",
        list(DOCUMENT_TYPES),
        index=None,
        format_func=type_label,
        placeholder="Selecciona un tipo de documento",
        key="document_type",
    )

    if doc_type:
        st.divider()
        for field in get_form_fields(doc_type):
            label = f"{field['label']} *" if field["required"] else field["label"]
            key = field_key(field["name"])
            if field["type"] == "textarea":
                st.text_area(label, key=key, height=120)
            elif field["type"] == "date":
                st.date_input(label, value=None, key=key, format="YYYY-MM-DD")
            elif field["type"] == "number":
                st.number_input(label, value=None, min_value=0.0, key=key, placeholder="0")
            else:
                st.text_input(label, key=key)

        st.button("⬇️ Generar PDF", key="generate", type="primary", on_click=generate_document)

# ==========================================
# SCREEN 2: HISTORY
# ==========================================
elif page == "history":
    st.title("🗂️ Historial de Documentos")
    st.caption("Consulta y descarga tus documentos generados")

    rows = []
    with st.spinner("Cargando documentos..."):
        try:
            user = auth.require_user()
            rows = history_rows(documents.list_for_user(user.id), cs.TIMEZONE)
        except backend.BackendError as e:
            st.toast(e.message or "Error al cargar documentos", icon="❌")

    if not rows:
        st.info("No tienes documentos generados todavía")
    else:
        widths = [2, 4, 3, 1, 1]
        for col, heading in zip(st.columns([2, 4, 3, 2]), ["Tipo", "Título", "Fecha de Creación", "Acciones"]):
            col.markdown(f"**{heading}**")
        for row in rows:
            c1, c2, c3, c4, c5 = st.columns(widths)
            c1.markdown(f"`{row['type']}`")
            c2.markdown(escape_markdown(row["title"]))
            c3.write(row["created"])
            if row["file_url"]:
                c4.link_button("⬇️", row["file_url"])
            else:
                c4.button("⬇️", key=f"download_{row['id']}", disabled=True, help=cs.PDF_PENDING_HINT)
            c5.button(
                "🗑️",
                key=f"delete_{row['id']}",
                on_click=delete_document,
                args=(row["id"], row["document_type"]),
            )

# ==========================================
# SCREEN 3: GLOSSARY
# ==========================================
elif page == "glossary":
    st.title("📚 Glosario de Términos Legales")
    st.caption("Consulta las definiciones de cláusulas y términos comunes en documentos legales")

    # Terms are read-only; fetch once per session.
    if "legal_terms" not in st.session_state:
        with st.spinner("Cargando términos..."):
            try:
                st.session_state.legal_terms = glossary.list_terms()
            except backend.BackendError as e:
                st.toast(e.message or "Error al cargar términos legales", icon="❌")

    query = st.text_input(
        "Buscar",
        placeholder="Buscar término o categoría...",
        key="glossary_query",
        label_visibility="collapsed",
    )
    results = filter_terms(st.session_state.get("legal_terms", []), query)

    if not results:
        st.info("No se encontraron términos que coincidan con tu búsqueda")
    for term in results:
        with st.container(border=True):
            c1, c2 = st.columns([4, 1])
            c1.subheader(escape_markdown(term["term"]))
            c2.markdown(f"`{term['category']}`")
            st.markdown(escape_markdown(term["definition"]))
