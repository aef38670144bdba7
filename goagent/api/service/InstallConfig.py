"""Where the rendered service artifacts are installed."""

from pydantic import BaseModel, ConfigDict, Field


class InstallConfig(BaseModel):
    """Install locations for systemd artifacts."""

    model_config = ConfigDict(extra="forbid")

    unit_dir: str = Field("/etc/systemd/system", description="Directory for the unit file")
    sysusers_dir: str = Field("/etc/sysusers.d", description="Directory for the sysusers.d fragment")
    tmpfiles_dir: str = Field("/etc/tmpfiles.d", description="Directory for the tmpfiles.d fragment")
    state_dir: str = Field("/var/lib/goagent", description="Directory for the start script and artifacts")
    systemctl: bool = Field(True, description="Whether to call systemd tools after writing files")
