# config.py

# -------------------------------------------------
# 🧾 SHARED FIELDS: "Partes del contrato"
# -------------------------------------------------
# Every contract starts with these. The complaint (denuncia) has its own list.
COMMON_FIELDS = [
    {"name": "titulo", "label": "Título del Documento", "type": "text", "required": True},
    {"name": "parte1_nombre", "label": "Nombre Parte 1", "type": "text", "required": True},
    {"name": "parte1_identificacion", "label": "Identificación Parte 1", "type": "text", "required": True},
    {"name": "parte2_nombre", "label": "Nombre Parte 2", "type": "text", "required": True},
    {"name": "parte2_identificacion", "label": "Identificación Parte 2", "type": "text", "required": True},
]

UNTITLED = "Documento sin título"

DOCUMENT_TYPES = {
    "arrendamiento": {
        "label": "Contrato de Arrendamiento",
        "short_label": "Arrendamiento",
        "fields": COMMON_FIELDS + [
            {"name": "direccion_inmueble", "label": "Dirección del Inmueble", "type": "text", "required": True},
            {"name": "canon_mensual", "label": "Canon Mensual", "type": "number", "required": True},
            {"name": "duracion_meses", "label": "Duración (meses)", "type": "number", "required": True},
            {"name": "deposito_garantia", "label": "Depósito de Garantía", "type": "number", "required": True},
        ],
    },
    "servicios": {
        "label": "Contrato de Servicios",
        "short_label": "Servicios",
        "fields": COMMON_FIELDS + [
            {"name": "descripcion_servicio", "label": "Descripción del Servicio", "type": "textarea", "required": True},
            {"name": "valor_total", "label": "Valor Total", "type": "number", "required": True},
            {"name": "plazo_entrega", "label": "Plazo de Entrega (días)", "type": "number", "required": True},
        ],
    },
    "confidencialidad": {
        "label": "Acuerdo de Confidencialidad",
        "short_label": "Confidencialidad",
        "fields": COMMON_FIELDS + [
            {"name": "informacion_confidencial", "label": "Descripción de Información Confidencial", "type": "textarea", "required": True},
            {"name": "duracion_anos", "label": "Duración (años)", "type": "number", "required": True},
        ],
    },
    "denuncia": {
        "label": "Denuncia",
        "short_label": "Denuncia",
        "fields": [
            {"name": "titulo", "label": "Título de la Denuncia", "type": "text", "required": True},
            {"name": "denunciante_nombre", "label": "Nombre del Denunciante", "type": "text", "required": True},
            {"name": "denunciante_identificacion", "label": "Identificación del Denunciante", "type": "text", "required": True},
            {"name": "denunciado_nombre", "label": "Nombre del Denunciado", "type": "text", "required": True},
            {"name": "hechos", "label": "Descripción de los Hechos", "type": "textarea", "required": True},
            {"name": "fecha_hechos", "label": "Fecha de los Hechos", "type": "date", "required": True},
            {"name": "lugar_hechos", "label": "Lugar de los Hechos", "type": "text", "required": True},
        ],
    },
    "compraventa": {
        "label": "Contrato de Compraventa",
        "short_label": "Compraventa",
        "fields": COMMON_FIELDS + [
            {"name": "descripcion_bien", "label": "Descripción del Bien", "type": "textarea", "required": True},
            {"name": "precio_venta", "label": "Precio de Venta", "type": "number", "required": True},
            {"name": "forma_pago", "label": "Forma de Pago", "type": "text", "required": True},
        ],
    },
}


def get_form_fields(doc_type):
    """Ordered field descriptors for a document type (common fields if unknown)."""
    if doc_type in DOCUMENT_TYPES:
        return DOCUMENT_TYPES[doc_type]["fields"]
    return COMMON_FIELDS


def missing_required_fields(doc_type, form_data):
    """
    Returns the required fields that have no value in form_data.
    Whitespace-only answers count as missing.
    """
    missing = []
    for field in get_form_fields(doc_type):
        value = form_data.get(field["name"])
        if field["required"] and (value is None or not str(value).strip()):
            missing.append(field)
    return missing


def document_title(form_data):
    return (form_data.get("titulo") or "").strip() or UNTITLED


def type_label(doc_type):
    return DOCUMENT_TYPES.get(doc_type, {}).get("label", doc_type)


def short_label(doc_type):
    return DOCUMENT_TYPES.get(doc_type, {}).get("short_label", doc_type)
