import httpx
import streamlit as st
from postgrest.exceptions import APIError
from supabase import create_client
from supabase_auth.errors import AuthError

from config import DOCUMENT_TYPES, document_title

DOCUMENTS_TABLE = "documents"
LEGAL_TERMS_TABLE = "legal_terms"


class BackendError(Exception):
    """A call to the hosted backend failed. The message is safe to show to the user."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class NotAuthenticated(BackendError):
    def __init__(self, message="Usuario no autenticado"):
        super().__init__(message)


def get_client():
    """One Supabase client per browser session; the caller keeps it in session_state."""
    return create_client(st.secrets["SUPABASE_URL"], st.secrets["SUPABASE_ANON_KEY"])


def _backend_message(exc, fallback):
    message = getattr(exc, "message", None) or str(exc)
    return message or fallback


def _execute(query, fallback):
    try:
        return query.execute()
    except (APIError, httpx.HTTPError) as e:
        raise BackendError(_backend_message(e, fallback)) from e


class AuthGateway:
    def __init__(self, client):
        self.client = client

    def sign_in(self, email, password):
        try:
            response = self.client.auth.sign_in_with_password({"email": email, "password": password})
        except (AuthError, httpx.HTTPError) as e:
            raise BackendError(_backend_message(e, "Error al iniciar sesión")) from e
        if response.user is None:
            raise NotAuthenticated()
        return response.user

    def sign_up(self, email, password):
        try:
            response = self.client.auth.sign_up({"email": email, "password": password})
        except (AuthError, httpx.HTTPError) as e:
            raise BackendError(_backend_message(e, "Error al crear la cuenta")) from e
        return response.user

    def sign_out(self):
        try:
            self.client.auth.sign_out()
        except (AuthError, httpx.HTTPError) as e:
            raise BackendError(_backend_message(e, "Error al cerrar sesión")) from e

    def current_user(self):
        try:
            response = self.client.auth.get_user()
        except (AuthError, httpx.HTTPError):
            # An expired or missing session reads as "nobody signed in".
            return None
        if response is None:
            return None
        return response.user

    def require_user(self):
        user = self.current_user()
        if user is None:
            raise NotAuthenticated()
        return user


class DocumentStore:
    """Insert, list and delete rows of the documents table."""

    def __init__(self, client):
        self.client = client

    def create(self, user_id, doc_type, form_data):
        if doc_type not in DOCUMENT_TYPES:
            raise ValueError(f"Unknown document type: {doc_type!r}")
        row = {
            "user_id": user_id,
            "document_type": doc_type,
            "title": document_title(form_data),
            "fields_data": {key: str(value) for key, value in form_data.items()},
        }
        response = _execute(
            self.client.table(DOCUMENTS_TABLE).insert(row),
            "Error al generar el documento",
        )
        return response.data[0] if response.data else row

    def list_for_user(self, user_id):
        response = _execute(
            self.client.table(DOCUMENTS_TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True),
            "Error al cargar documentos",
        )
        return response.data or []

    def delete(self, document_id):
        _execute(
            self.client.table(DOCUMENTS_TABLE).delete().eq("id", document_id),
            "Error al eliminar documento",
        )


class GlossaryStore:
    def __init__(self, client):
        self.client = client

    def list_terms(self):
        response = _execute(
            self.client.table(LEGAL_TERMS_TABLE).select("*").order("term"),
            "Error al cargar términos legales",
        )
        return response.data or []
