from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional


class MonitorAlertError(Exception):
    """Erro base do relay."""


class MissingAlertField(MonitorAlertError, KeyError):
    """Campo obrigatório ausente (ou nulo) no payload do alerta."""

    def __init__(self, path: str):
        super().__init__(path)
        self.path = path

    def __str__(self):
        return self.path


class SlackDeliveryError(MonitorAlertError):
    """Falha de rede ou resposta não-2xx do webhook do Slack."""


class AlertSchema(str, Enum):
    # classic: alerta na raiz do body, condição plana, status resolvido = "Resolved"
    CLASSIC = "classic"
    # metric: alerta em body.data, condição em allOf[0], status resolvido = "Deactivated"
    METRIC = "metric"


class AlertStatus(str, Enum):
    ACTIVATED = "Activated"
    RESOLVED = "Resolved"
    DEACTIVATED = "Deactivated"

    @classmethod
    def parse(cls, raw: str) -> Optional["AlertStatus"]:
        try:
            return cls(raw)
        except ValueError:
            return None


@dataclass(frozen=True)
class Alert:
    status: str
    resource_name: str
    rule_name: str
    portal_link: str
    metric_name: str
    operator: str
    threshold: str

    @property
    def known_status(self) -> Optional[AlertStatus]:
        return AlertStatus.parse(self.status)


@dataclass(frozen=True)
class SlackAttachment:
    color: str
    title: str
    title_link: str
    text: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "color": self.color,
            "title": self.title,
            "title_link": self.title_link,
            "text": self.text,
        }


@dataclass(frozen=True)
class SlackMessage:
    channel: str
    attachments: List[SlackAttachment] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "channel": self.channel,
            "attachments": [a.to_dict() for a in self.attachments],
        }


@dataclass(frozen=True)
class InboundRequest:
    """Dados que o host HTTP entrega ao handler."""

    query: Mapping[str, str] = field(default_factory=dict)
    body: Optional[Any] = None


@dataclass(frozen=True)
class HandlerResponse:
    status_code: int
    body: str


@dataclass(frozen=True)
class StepResult:
    """
    Resultado de uma etapa do pipeline: ou carrega um valor, ou uma resposta
    de falha terminal. and_then só executa a próxima etapa em caso de sucesso.
    """

    value: Any = None
    failure: Optional[HandlerResponse] = None

    @classmethod
    def ok(cls, value: Any = None) -> "StepResult":
        return cls(value=value)

    @classmethod
    def fail(cls, body: str, status_code: int = 400) -> "StepResult":
        return cls(failure=HandlerResponse(status_code, body))

    @property
    def is_ok(self) -> bool:
        return self.failure is None

    def and_then(self, step: Callable[[Any], "StepResult"]) -> "StepResult":
        if not self.is_ok:
            return self
        return step(self.value)
