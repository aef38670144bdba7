"""GoCD agent service configuration with Pydantic validation."""

import re
from pathlib import PurePosixPath
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ...constants import DEFAULT_ACCOUNT_NAME

DEFAULT_INITIAL_HEAP = "128m"
DEFAULT_MAX_HEAP = "256m"
DEFAULT_AGENT_JAR = "/usr/share/go-agent/lib/agent-bootstrapper.jar"

_HEAP_SIZE = re.compile(r"\d+[kKmMgGtT]?")
_ENVIRONMENT_KEY = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def default_startup_options(initial_heap: str, max_heap: str) -> tuple[str, ...]:
    """Startup options the agent JVM gets unless the caller supplies its own."""
    return (
        f"-Xms{initial_heap}",
        f"-Xmx{max_heap}",
        "-Djava.io.tmpdir=/tmp",
        "-Dcruise.console.publish.interval=10",
        "-Djava.security.egd=file:/dev/./urandom",
    )


class ServiceConfig(BaseModel):
    """Options for provisioning and launching the GoCD agent under systemd.

    Every field has a default, so an empty dict is a complete configuration.
    Sequences are stored as tuples; treat ``environment`` as read-only too.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    enable: bool = Field(False, description="Whether the agent service should be installed")
    user: str = Field(DEFAULT_ACCOUNT_NAME, description="User the agent executes under")
    group: str = Field(
        DEFAULT_ACCOUNT_NAME,
        description="Primary group of the user when the default user is provisioned",
    )
    extra_groups: tuple[str, ...] = Field(default_factory=tuple, description="Extra groups for the provisioned user")
    packages: tuple[str, ...] = Field(
        default_factory=lambda: ("/usr/local", "/usr", "/"),
        description="Install prefixes whose bin/ and sbin/ are put on PATH",
    )
    agent_config: str = Field("", description="Agent auto-registration properties (key=value lines)")
    go_server: str = Field("https://127.0.0.1:8154/go", description="URL of the GoCD server")
    work_dir: str = Field("/var/lib/go-agent", description="Working directory and home of the agent")
    initial_java_heap_size: str = Field(DEFAULT_INITIAL_HEAP, description="Initial JVM heap size")
    max_java_heap_memory: str = Field(DEFAULT_MAX_HEAP, description="Maximum JVM heap size")
    startup_options: tuple[str, ...] = Field(
        default_factory=lambda: default_startup_options(DEFAULT_INITIAL_HEAP, DEFAULT_MAX_HEAP),
        description="JVM startup arguments, derived from heap sizes unless given",
    )
    extra_options: tuple[str, ...] = Field(default_factory=tuple, description="Additional JVM arguments")
    environment: dict[str, str] = Field(
        default_factory=dict, description="Extra environment variables, overriding computed ones"
    )
    java: str = Field("java", description="Java launcher, resolved on PATH unless absolute")
    git: str = Field("git", description="Git executable, resolved on PATH unless absolute")
    agent_jar: str = Field(DEFAULT_AGENT_JAR, description="Path to agent-bootstrapper.jar")

    @model_validator(mode="before")
    @classmethod
    def derive_startup_options(cls, values: Any) -> Any:
        # Explicit startup_options replace the derived list entirely
        if not isinstance(values, dict) or values.get("startup_options") is not None:
            return values
        values = dict(values)
        values["startup_options"] = default_startup_options(
            values.get("initial_java_heap_size", DEFAULT_INITIAL_HEAP),
            values.get("max_java_heap_memory", DEFAULT_MAX_HEAP),
        )
        return values

    @field_validator("user", "group", "go_server", "java", "git", "agent_jar")
    @classmethod
    def validate_non_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("work_dir")
    @classmethod
    def validate_work_dir(cls, v: str) -> str:
        if not v or not PurePosixPath(v).is_absolute():
            raise ValueError(f"work_dir must be an absolute path, got: {v!r}")
        return v

    @field_validator("initial_java_heap_size", "max_java_heap_memory")
    @classmethod
    def validate_heap_size(cls, v: str) -> str:
        if not _HEAP_SIZE.fullmatch(v):
            raise ValueError(f"heap size must look like '128m' or '2g', got: {v!r}")
        return v

    @field_validator("go_server")
    @classmethod
    def validate_go_server(cls, v: str) -> str:
        if not (v.startswith("http://") or v.startswith("https://")):
            raise ValueError(f"go_server must be an http(s) URL, got: {v!r}")
        if any(c.isspace() or not c.isprintable() for c in v):
            raise ValueError(f"go_server must not contain whitespace or control characters, got: {v!r}")
        return v

    @field_validator("extra_groups")
    @classmethod
    def validate_extra_groups(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        # Set semantics, first occurrence keeps its position
        return tuple(dict.fromkeys(v))

    @field_validator("environment")
    @classmethod
    def validate_environment_keys(cls, v: dict[str, str]) -> dict[str, str]:
        for key in v:
            if not _ENVIRONMENT_KEY.fullmatch(key):
                raise ValueError(f"environment key must be a variable name, got: {key!r}")
        return v

    def to_dict(self) -> dict[str, Any]:
        """Dump for the config file.

        Startup options equal to the derived ones are left out so a saved file
        keeps following the heap sizes.
        """
        data = self.model_dump(mode="json")
        derived = default_startup_options(self.initial_java_heap_size, self.max_java_heap_memory)
        if tuple(data["startup_options"]) == derived:
            del data["startup_options"]
        return data
