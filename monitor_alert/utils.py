from typing import Any, Mapping, Sequence

from .models import MissingAlertField


# Ordem importa: '&' primeiro para não re-escapar as entidades geradas depois
_SLACK_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)


def escape_slack_text(text: str) -> str:
    """
    Escapa os caracteres de controle do mrkdwn do Slack (&, < e >).
    Não é idempotente: aplicar duas vezes escapa de novo o '&' das entidades.
    """
    if not isinstance(text, str):
        raise TypeError(f"escape_slack_text espera str, recebeu {type(text).__name__}")
    for raw, entity in _SLACK_ESCAPES:
        text = text.replace(raw, entity)
    return text


def _join_path(parent: str, key: Any) -> str:
    if isinstance(key, int):
        return f"{parent}[{key}]"
    return f"{parent}.{key}" if parent else str(key)


def require_field(container: Any, key: Any, path: str = "") -> Any:
    """
    Lê container[key] exigindo que exista e não seja nulo.
    Levanta MissingAlertField com o caminho completo (ex.: context.condition.allOf[0]).
    """
    full_path = _join_path(path, key)
    if isinstance(key, int):
        if not isinstance(container, Sequence) or isinstance(container, str) or key >= len(container):
            raise MissingAlertField(full_path)
        value = container[key]
    else:
        if not isinstance(container, Mapping) or key not in container:
            raise MissingAlertField(full_path)
        value = container[key]
    if value is None:
        raise MissingAlertField(full_path)
    return value


def require_text(container: Any, key: Any, path: str = "") -> str:
    value = require_field(container, key, path)
    # threshold costuma chegar numérico no payload do Azure
    return value if isinstance(value, str) else str(value)
