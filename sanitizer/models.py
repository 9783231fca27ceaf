"""
Response models returned by the Dinky admin API.

Attributes are snake_case; ``from_dict``/``to_dict`` translate to and from the
camelCase keys used on the wire. Unknown keys are ignored and missing keys
default to None, so partial payloads decode without errors.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Optional


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


class _WireModel:
    """Camel-case (de)serialization for flat dataclasses."""

    # Attribute -> wire key, where it differs from the plain camelCase form
    _WIRE_KEYS: dict[str, str] = {}

    @classmethod
    def _wire_key(cls, name: str) -> str:
        return cls._WIRE_KEYS.get(name, _camel(name))

    @classmethod
    def from_dict(cls, data: dict[str, Any]):
        if not isinstance(data, dict):
            raise TypeError(f"{cls.__name__} expects an object, got {type(data).__name__}")
        kwargs = {}
        for f in fields(cls):
            key = cls._wire_key(f.name)
            if key in data:
                kwargs[f.name] = cls._decode_field(f.name, data[key])
        return cls(**kwargs)

    @classmethod
    def _decode_field(cls, name: str, value: Any) -> Any:
        return value

    def to_dict(self) -> dict[str, Any]:
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, _WireModel):
                value = value.to_dict()
            elif isinstance(value, list):
                value = [v.to_dict() if isinstance(v, _WireModel) else v for v in value]
            result[self._wire_key(f.name)] = value
        return result


@dataclass
class SqlExplainResult(_WireModel):
    """Explain output for one statement of a submitted script."""
    index: Optional[int] = None
    type: Optional[str] = None
    sql: Optional[str] = None
    parse: Optional[str] = None
    explain: Optional[str] = None
    error: Optional[str] = None
    parse_true: Optional[bool] = None
    explain_true: Optional[bool] = None
    explain_time: Optional[str] = None


@dataclass
class ExplainResult(_WireModel):
    """Explain output for a whole script (OpenAPI flavour)."""
    correct: Optional[bool] = None
    total: Optional[int] = None
    sql_explain_results: list[SqlExplainResult] = field(default_factory=list)

    @classmethod
    def _decode_field(cls, name, value):
        if name == "sql_explain_results" and value is not None:
            return [SqlExplainResult.from_dict(v) for v in value]
        return value


@dataclass
class History(_WireModel):
    """One execution of a statement in the studio."""
    id: Optional[int] = None
    tenant_id: Optional[int] = None
    cluster_id: Optional[int] = None
    session: Optional[str] = None
    job_id: Optional[str] = None
    job_name: Optional[str] = None
    job_manager_address: Optional[str] = None
    status: Optional[int] = None
    type: Optional[str] = None
    statement: Optional[str] = None
    error: Optional[str] = None
    result: Optional[Any] = None
    config_json: Optional[Any] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    task_id: Optional[int] = None


@dataclass
class JobInfoDetail(_WireModel):
    """Aggregated view of a running job instance."""
    id: Optional[int] = None
    instance: Optional[dict[str, Any]] = None
    cluster: Optional[dict[str, Any]] = None
    history: Optional[History] = None
    job_history: Optional[dict[str, Any]] = None

    @classmethod
    def _decode_field(cls, name, value):
        if name == "history" and value is not None:
            return History.from_dict(value)
        return value


@dataclass
class DataBase(_WireModel):
    """A registered data source connection."""
    id: Optional[int] = None
    name: Optional[str] = None
    alias: Optional[str] = None
    group_name: Optional[str] = None
    type: Optional[str] = None
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    note: Optional[str] = None
    flink_config: Optional[str] = None
    flink_template: Optional[str] = None
    db_version: Optional[str] = None
    status: Optional[bool] = None
    enabled: Optional[bool] = None


@dataclass
class Result(_WireModel):
    """Generic single-payload response envelope."""
    code: Optional[int] = None
    data: Any = None
    msg: Optional[str] = None
    time: Optional[str] = None

    _WIRE_KEYS = {"data": "datas"}


@dataclass
class ProTableResult(_WireModel):
    """Paged table response envelope."""
    success: Optional[bool] = None
    total: Optional[int] = None
    data: Optional[list] = None
