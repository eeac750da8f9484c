"""Package alarm service: ``/v1/packages/:packageId/alarms``."""

from dataclasses import dataclass, field
from typing import Any

from massdriver.errors.handler import raise_for_status
from massdriver.services.base import BaseService


@dataclass
class Dimension:
    name: str
    value: str


@dataclass
class Metric:
    name: str
    namespace: str
    statistic: str
    dimensions: list[Dimension] = field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name, "namespace": self.namespace, "statistic": self.statistic}
        if self.dimensions:
            payload["dimensions"] = [{"name": d.name, "value": d.value} for d in self.dimensions]
        return payload

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Metric":
        return cls(
            name=data.get("name") or "",
            namespace=data.get("namespace") or "",
            statistic=data.get("statistic") or "",
            dimensions=[Dimension(name=d.get("name", ""), value=d.get("value", "")) for d in data.get("dimensions") or []],
        )


# The API spells this key "comparsion_operator".
COMPARISON_OPERATOR_KEY = "comparsion_operator"


@dataclass
class Alarm:
    """A cloud metric alarm attached to a package."""

    display_name: str = ""
    cloud_resource_id: str = ""
    metric: Metric | None = None
    threshold: float = 0.0
    period_minutes: int = 0
    comparison_operator: str = ""
    id: str = ""

    def to_payload(self) -> dict[str, Any]:
        """Request body; zero and empty optional fields are omitted."""
        payload: dict[str, Any] = {}
        if self.id:
            payload["id"] = self.id
        payload["display_name"] = self.display_name
        payload["cloud_resource_id"] = self.cloud_resource_id
        if self.metric is not None:
            payload["metric"] = self.metric.to_payload()
        if self.threshold:
            payload["threshold"] = self.threshold
        if self.period_minutes:
            payload["period_minutes"] = self.period_minutes
        if self.comparison_operator:
            payload[COMPARISON_OPERATOR_KEY] = self.comparison_operator
        return payload

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Alarm":
        metric = data.get("metric")
        return cls(
            display_name=data.get("display_name") or "",
            cloud_resource_id=data.get("cloud_resource_id") or "",
            metric=Metric.from_dict(metric) if metric else None,
            threshold=data.get("threshold") or 0.0,
            period_minutes=data.get("period_minutes") or 0,
            comparison_operator=data.get(COMPARISON_OPERATOR_KEY) or "",
            id=data.get("id") or "",
        )


def _alarms_path(package_id: str, alarm_id: str | None = None) -> str:
    path = f"/v1/packages/{package_id}/alarms"
    if alarm_id:
        path += f"/{alarm_id}"
    return path


class PackageAlarmService(BaseService):
    """Manage alarms for a package."""

    def create_package_alarm(self, package_id: str, alarm: Alarm) -> Alarm:
        response = self.http.post(_alarms_path(package_id), json=alarm.to_payload())
        raise_for_status(response, "create alarm")
        return Alarm.from_dict(response.json())

    def get_package_alarm(self, package_id: str, alarm_id: str) -> Alarm:
        response = self.http.get(_alarms_path(package_id, alarm_id))
        raise_for_status(response, "get alarm")
        return Alarm.from_dict(response.json())

    def update_package_alarm(self, package_id: str, alarm_id: str, alarm: Alarm) -> Alarm:
        response = self.http.put(_alarms_path(package_id, alarm_id), json=alarm.to_payload())
        raise_for_status(response, "update alarm")
        return Alarm.from_dict(response.json())

    def delete_package_alarm(self, package_id: str, alarm_id: str) -> None:
        response = self.http.delete(_alarms_path(package_id, alarm_id))
        raise_for_status(response, "delete alarm")
