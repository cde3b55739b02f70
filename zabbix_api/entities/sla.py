"""IT service SLA reports (``service.getsla``)."""

from typing import Any, Mapping, Optional

from pydantic import Field

from ..errors import DecodeError
from ..params import ParamValue
from .base import QueryClient, ZabbixObject


class SLA(ZabbixObject):
    """SLA of one service over one interval. Times are in seconds."""

    from_time: float = Field(0.0, alias="from")
    to_time: float = Field(0.0, alias="to")
    sla: float = 0.0
    ok_time: float = Field(0.0, alias="okTime")
    problem_time: float = Field(0.0, alias="problemTime")
    downtime_time: float = Field(0.0, alias="downtimeTime")


class SLAClient(QueryClient[SLA]):
    """SLA reports for a single service.

    The response is a map keyed by service id rather than a record array,
    so ``get`` walks it by hand instead of using a decode strategy.
    """

    object_name = "service"
    model = SLA

    def get(self, params: Optional[Mapping[str, ParamValue]] = None) -> Optional[SLA]:  # type: ignore[override]
        """Wrapper for ``service.getsla``.

        ``params["serviceids"]`` must be a single service id. Returns the
        first interval of that service, or None when there is none.
        """
        query = self.build_params(params)
        service_id = query.get("serviceids")
        if not isinstance(service_id, str):
            raise ValueError("service.getsla needs 'serviceids' set to a single service id")

        response = self.api.call_with_error(self.method("getsla"), query)
        intervals = _intervals(response.result, service_id)
        if not intervals:
            return None
        return SLA.model_validate(intervals[0])

    def get_by_service_id(self, service_id: str, **params: Any) -> Optional[SLA]:
        """SLA of ``service_id``; extra params such as ``intervals`` pass through."""
        return self.get({**params, "serviceids": service_id})


def _intervals(result: Any, service_id: str) -> list:
    try:
        intervals = result[service_id]["sla"]
    except (KeyError, TypeError) as e:
        raise DecodeError(f"service.getsla response has no SLA for service {service_id}") from e
    if not isinstance(intervals, list):
        raise DecodeError(f"SLA of service {service_id} is not a list")
    return intervals
