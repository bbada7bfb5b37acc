# -*- coding: utf-8 -*-
"""Application constants."""

APP_NAME = "sneaker-heart"
APP_VERSION = "0.1.0"

DEFAULT_SETTINGS_FILE = "settings.json"
DEFAULT_DATA_FILE = "sneakers-data.json"

EXPECTED_ITEM_COUNT = 4
MAX_EMAIL_LENGTH = 254

SESSION_STORAGE_KEY = "tinker_email_submitted"

BRAND_LABEL = "Nike SB"
BRAND_RED = "#ff0000"
OVERLAY_GREEN = "#22c55e"
OVERLAY_RED = "#ef4444"

# User-facing texts (es-AR)
MSG_EMAIL_REQUIRED = "Por favor, ingresa tu correo electrónico."
MSG_EMAIL_TOO_LONG = "El correo electrónico es demasiado largo (máximo 254 caracteres)."
MSG_EMAIL_INVALID = "Por favor, ingresa un correo electrónico válido."
MSG_SUBMIT_FAILED = "Hubo un problema al enviar tu correo. Por favor, intenta de nuevo."

EMAIL_HEADLINE = "Hace match con tu par ideal."
EMAIL_PLACEHOLDER = "tu@correo.com"
EMAIL_SUBMIT_LABEL = "Continuar"
EMAIL_SUBMITTING_LABEL = "Enviando..."

COMPLETION_TITLE = "¡Gracias por participar!"
COMPLETION_CODE_LABEL = "Tu código promocional:"
COMPLETION_BODY = "Usá este código en tu próxima compra y hacé match con el par perfecto para vos."
COMPLETION_LINK_LABEL = "Ir a Drifters.com.ar"

IMAGE_UNAVAILABLE = "Imagen no disponible"

DEFAULT_HOTKEYS = {
    "like": "Right",
    "dislike": "Left",
}
