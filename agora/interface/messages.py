"""Locale-specific text for error responses.

Every ``DomainError`` carries a message key and format parameters; this
module renders them for the caller's locale. Strings are pure data.
"""

from typing import Literal

Locale = Literal["en", "pt-BR"]

_MESSAGES: dict[str, dict[Locale, str]] = {
    "validation_error": {
        "en": "Invalid request data",
        "pt-BR": "Dados da requisição inválidos.",
    },
    "user_not_found": {
        "en": "User not found.",
        "pt-BR": "Usuário não encontrado.",
    },
    "post_not_found": {
        "en": "Post not found.",
        "pt-BR": "Publicação não encontrada.",
    },
    "comment_not_found": {
        "en": "Comment not found.",
        "pt-BR": "Resposta não encontrada.",
    },
    "duplicate_username": {
        "en": "This username is already in use! Try another one.",
        "pt-BR": "Este username já está em uso! Tente outro.",
    },
    "duplicate_email": {
        "en": "This e-mail is already in use! Try another one.",
        "pt-BR": "Este e-mail já está em uso! Tente outro.",
    },
    "invalid_credentials": {
        "en": "Invalid e-mail/username or password.",
        "pt-BR": "E-mail ou senha inválidos.",
    },
    "unauthorized": {
        "en": "User not authorized.",
        "pt-BR": "Usuário não autorizado.",
    },
    "token_missing": {
        "en": "Authentication token not provided.",
        "pt-BR": "Token de autenticação não informado.",
    },
    "token_invalid": {
        "en": "Invalid or expired authentication token.",
        "pt-BR": "Token de autenticação inválido ou expirado.",
    },
    "internal_error": {
        "en": "An unexpected error occurred.",
        "pt-BR": "Ocorreu um erro inesperado.",
    },
}


def resolve_locale(accept_language: str | None, default: Locale = "en") -> Locale:
    """Pick the first supported locale from an Accept-Language header.

    Quality values are honoured; a bare ``pt`` selects ``pt-BR``.

    Args:
        accept_language: Raw header value
        default: Locale used when nothing matches

    Returns:
        A supported locale
    """
    if not accept_language:
        return default

    candidates: list[tuple[float, str]] = []
    for part in accept_language.split(","):
        tag, _, params = part.strip().partition(";")
        quality = 1.0
        if params.strip().startswith("q="):
            try:
                quality = float(params.strip()[2:])
            except ValueError:
                quality = 0.0
        if tag:
            candidates.append((quality, tag.strip().lower()))

    # Stable sort keeps header order among equal qualities
    for _, tag in sorted(candidates, key=lambda c: -c[0]):
        language = tag.split("-")[0]
        if language == "pt":
            return "pt-BR"
        if language == "en":
            return "en"
    return default


def render(message_key: str, locale: Locale, fallback: str) -> str:
    """Return the localized text for a message key.

    Args:
        message_key: Key carried by the error
        locale: Target locale
        fallback: Text used for unknown keys

    Returns:
        Localized message
    """
    entry = _MESSAGES.get(message_key)
    if entry is None:
        return fallback
    return entry.get(locale, entry["en"])
