"""Payloads de exemplo do Azure Monitor usados nos testes."""
import copy

CLASSIC_ACTIVATED = {
    "status": "Activated",
    "context": {
        "timestamp": "2024-03-11T09:40:12.1234567Z",
        "id": "/subscriptions/0000/resourceGroups/rg-web/providers/microsoft.insights/alertrules/cpu-high",
        "name": "cpu-high",
        "conditionType": "Metric",
        "condition": {
            "metricName": "Percentage CPU",
            "metricUnit": "Percent",
            "metricValue": "91.3",
            "threshold": "80",
            "windowSize": "5",
            "timeAggregation": "Average",
            "operator": "GreaterThan",
        },
        "subscriptionId": "0000",
        "resourceGroupName": "rg-web",
        "resourceName": "vm-web-01",
        "resourceType": "microsoft.compute/virtualmachines",
        "portalLink": "https://portal.azure.com/#resource/subscriptions/0000/resourceGroups/rg-web/providers/Microsoft.Compute/virtualMachines/vm-web-01",
    },
    "properties": {},
}

METRIC_ACTIVATED = {
    "schemaId": "AzureMonitorMetricAlert",
    "data": {
        "version": "2.0",
        "status": "Activated",
        "context": {
            "timestamp": "2024-03-11T09:40:12.1234567Z",
            "id": "/subscriptions/0000/resourceGroups/rg-web/providers/microsoft.insights/metricAlerts/cpu-high",
            "name": "cpu-high",
            "severity": "3",
            "conditionType": "SingleResourceMultipleMetricCriteria",
            "condition": {
                "windowSize": "PT5M",
                "allOf": [
                    {
                        "metricName": "Percentage CPU",
                        "metricNamespace": "Microsoft.Compute/virtualMachines",
                        "operator": "GreaterThan",
                        "threshold": 80,
                        "timeAggregation": "Average",
                        "metricValue": 91.3,
                    }
                ],
            },
            "subscriptionId": "0000",
            "resourceGroupName": "rg-web",
            "resourceName": "vm-web-01",
            "resourceType": "Microsoft.Compute/virtualMachines",
            "portalLink": "https://portal.azure.com/#resource/subscriptions/0000/resourceGroups/rg-web/providers/Microsoft.Compute/virtualMachines/vm-web-01",
        },
        "properties": {},
    },
}


def classic(status="Activated", **context_overrides):
    payload = copy.deepcopy(CLASSIC_ACTIVATED)
    payload["status"] = status
    payload["context"].update(context_overrides)
    return payload


def metric(status="Activated", **context_overrides):
    payload = copy.deepcopy(METRIC_ACTIVATED)
    payload["data"]["status"] = status
    payload["data"]["context"].update(context_overrides)
    return payload
