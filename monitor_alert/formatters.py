from typing import Any, Dict

from .constants import (
    ACTIVATED_COLOR,
    CHANNEL_PREFIX,
    DEFAULT_COLOR,
    PORTAL_LINK_LABEL,
    RESOLVED_COLOR,
)
from .models import Alert, AlertSchema, AlertStatus, SlackAttachment, SlackMessage
from .utils import escape_slack_text, require_field, require_text


# Mapa exaustivo: todo AlertStatus tem cor; status fora do enum cai em DEFAULT_COLOR
STATUS_COLORS: Dict[AlertStatus, str] = {
    AlertStatus.ACTIVATED: ACTIVATED_COLOR,
    AlertStatus.RESOLVED: RESOLVED_COLOR,
    AlertStatus.DEACTIVATED: RESOLVED_COLOR,
}


def get_status_color(alert: Alert) -> str:
    status = alert.known_status
    if status is None:
        return DEFAULT_COLOR
    return STATUS_COLORS[status]


def _extract_classic(body: Any) -> Alert:
    context = require_field(body, "context")
    condition = require_field(context, "condition", "context")
    return Alert(
        status=require_text(body, "status"),
        resource_name=require_text(context, "resourceName", "context"),
        rule_name=require_text(context, "name", "context"),
        portal_link=require_text(context, "portalLink", "context"),
        metric_name=require_text(condition, "metricName", "context.condition"),
        operator=require_text(condition, "operator", "context.condition"),
        threshold=require_text(condition, "threshold", "context.condition"),
    )


def _extract_metric(body: Any) -> Alert:
    data = require_field(body, "data")
    context = require_field(data, "context", "data")
    condition = require_field(context, "condition", "data.context")
    all_of = require_field(condition, "allOf", "data.context.condition")
    criteria = require_field(all_of, 0, "data.context.condition.allOf")
    criteria_path = "data.context.condition.allOf[0]"
    return Alert(
        status=require_text(data, "status", "data"),
        resource_name=require_text(context, "resourceName", "data.context"),
        rule_name=require_text(context, "name", "data.context"),
        portal_link=require_text(context, "portalLink", "data.context"),
        metric_name=require_text(criteria, "metricName", criteria_path),
        operator=require_text(criteria, "operator", criteria_path),
        threshold=require_text(criteria, "threshold", criteria_path),
    )


_EXTRACTORS = {
    AlertSchema.CLASSIC: _extract_classic,
    AlertSchema.METRIC: _extract_metric,
}


def extract_alert(body: Any, schema: AlertSchema = AlertSchema.CLASSIC) -> Alert:
    """
    Lê o alerta do body conforme a variante de schema configurada no deploy.
    Não tenta adivinhar a variante: um body no outro formato gera MissingAlertField.
    """
    return _EXTRACTORS[AlertSchema(schema)](body)


def format_slack_message(channel: str, alert: Alert) -> SlackMessage:
    status = alert.status.lower()
    resource = escape_slack_text(alert.resource_name)
    rule = escape_slack_text(alert.rule_name)
    metric = escape_slack_text(alert.metric_name)
    operator = escape_slack_text(alert.operator)
    threshold = escape_slack_text(alert.threshold)

    # portalLink vai cru: é URL gerada pelo próprio Azure (ver DESIGN.md)
    lines = [
        f"*Rule:* {rule} was {status}",
        f"*Condition:* {metric} {operator} {threshold}",
        f"<{alert.portal_link}|{PORTAL_LINK_LABEL}>",
    ]

    attachment = SlackAttachment(
        color=get_status_color(alert),
        title=f"Alert {status} for {resource}",
        title_link=alert.portal_link,
        text="\n".join(lines),
    )
    return SlackMessage(channel=f"{CHANNEL_PREFIX}{channel}", attachments=[attachment])
