"""Derive the OS user and group to provision for the agent."""

from .AccountPolicy import AccountPolicy
from .AccountSpec import AccountSpec
from .GroupSpec import GroupSpec
from .ServiceConfig import ServiceConfig


def _derive_accounts(cfg: ServiceConfig) -> tuple[AccountSpec | None, GroupSpec | None]:
    """Return (account, group); each is None when the caller manages it."""
    account = None
    if AccountPolicy.for_name(cfg.user) is AccountPolicy.MANAGE_ACCOUNT:
        account = AccountSpec(
            name=cfg.user,
            home=cfg.work_dir,
            group=cfg.group,
            extra_groups=tuple(cfg.extra_groups),
        )

    group = None
    if AccountPolicy.for_name(cfg.group) is AccountPolicy.MANAGE_ACCOUNT:
        group = GroupSpec(name=cfg.group)

    return account, group
