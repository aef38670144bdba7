"""Result of rendering a ServiceConfig."""

from dataclasses import asdict, dataclass
from typing import Any

from .AccountSpec import AccountSpec
from .GroupSpec import GroupSpec
from .UnitSpec import UnitSpec


@dataclass(frozen=True)
class RenderedService:
    """Account, group and unit specs; account and group are None when externally managed."""

    account: AccountSpec | None
    group: GroupSpec | None
    unit: UnitSpec

    def to_dict(self) -> dict[str, Any]:
        """Plain dict form with lists instead of tuples, for JSON/YAML output."""

        def _plain(value: Any) -> Any:
            if isinstance(value, dict):
                return {k: _plain(v) for k, v in value.items()}
            if isinstance(value, (list, tuple)):
                return [_plain(v) for v in value]
            return value

        return {
            "account": _plain(asdict(self.account)) if self.account else {},
            "group": _plain(asdict(self.group)) if self.group else {},
            "unit": _plain(asdict(self.unit)),
        }
