# -*- encoding: utf-8 -*-
"""
Environment facts exposed to constraint expressions.

Variables:
    agent.id            generated (standalone) or assigned agent identifier
    agent.version       release version of the running agent
    host.architecture   host architecture (x86_64, aarch64, ...)
    os.family           operating system the agent runs on (linux, windows, darwin)
    os.kernel           kernel release
    os.platform         distribution family (debian, redhat, suse, darwin, windows)
    os.version          operating system version (20.04, 13.4.1, ...)
"""

import logging
import platform
import sys
import uuid
from dataclasses import dataclass
from typing import Iterator, Mapping, Optional

from dsfilter.config import Settings
from dsfilter.exceptions import HostFactsError

logger = logging.getLogger(__name__)

AGENT_ID = "agent.id"
AGENT_VERSION = "agent.version"
HOST_ARCHITECTURE = "host.architecture"
OS_FAMILY = "os.family"
OS_KERNEL = "os.kernel"
OS_PLATFORM = "os.platform"
OS_VERSION = "os.version"

VARIABLES = (
    AGENT_ID,
    AGENT_VERSION,
    HOST_ARCHITECTURE,
    OS_FAMILY,
    OS_KERNEL,
    OS_PLATFORM,
    OS_VERSION,
)

# os-release ID -> distribution family
_LINUX_FAMILIES: dict[str, str] = {
    "debian": "debian",
    "ubuntu": "debian",
    "raspbian": "debian",
    "linuxmint": "debian",
    "rhel": "redhat",
    "centos": "redhat",
    "fedora": "redhat",
    "amzn": "redhat",
    "ol": "redhat",
    "rocky": "redhat",
    "almalinux": "redhat",
    "scientific": "redhat",
    "sles": "suse",
    "opensuse": "suse",
    "opensuse-leap": "suse",
    "arch": "arch",
    "gentoo": "gentoo",
}

_ARCHITECTURES: dict[str, str] = {
    "amd64": "x86_64",
    "x64": "x86_64",
    "arm64": "aarch64",
}


@dataclass(frozen=True)
class HostInfo:
    architecture: str
    kernel_version: str
    os_name: str
    os_family: str
    os_version: str


@dataclass(frozen=True)
class AgentInfo:
    agent_id: str
    version: str

    @classmethod
    def load(cls, settings: Settings) -> "AgentInfo":
        """
        Use the configured agent id, or generate one for a standalone agent.

        A generated id is not persisted: `agent.id` is stable for the life of
        the process only. Set DSFILTER_AGENT_ID (or Settings.agent_id) for an
        id that survives restarts.
        """
        agent_id = settings.agent_id
        if not agent_id:
            agent_id = str(uuid.uuid4())
            logger.debug("no agent id configured, generated %s", agent_id)
        return cls(agent_id=agent_id, version=settings.agent_version)


def runtime_os() -> str:
    """Name of the running operating system, e.g. "linux" or "windows"."""
    name = sys.platform
    if name.startswith("linux"):
        return "linux"
    if name in ("win32", "cygwin"):
        return "windows"
    if name.startswith("freebsd"):
        return "freebsd"
    return name


def linux_family(os_release: Mapping[str, str]) -> str:
    """Map os-release fields to a distribution family."""
    distro = os_release.get("ID", "").lower()
    if distro in _LINUX_FAMILIES:
        return _LINUX_FAMILIES[distro]
    like = os_release.get("ID_LIKE", "").lower().split()
    for candidate in like:
        if candidate in _LINUX_FAMILIES:
            return _LINUX_FAMILIES[candidate]
    return like[0] if like else distro


def host_info() -> HostInfo:
    """
    Read host facts from the running system.

    Raises:
        HostFactsError: If the operating system cannot be queried
    """
    system = runtime_os()
    try:
        machine = platform.machine()
        kernel = platform.release()
        if system == "linux":
            os_release = platform.freedesktop_os_release()
            family = linux_family(os_release)
            version = os_release.get("VERSION_ID", "")
        elif system == "darwin":
            family = "darwin"
            version = platform.mac_ver()[0]
        elif system == "windows":
            family = "windows"
            version = platform.version()
        else:
            family = system
            version = platform.version()
    except OSError as e:
        raise HostFactsError(f"failed to read host information: {e}") from e

    return HostInfo(
        architecture=_ARCHITECTURES.get(machine.lower(), machine),
        kernel_version=kernel,
        os_name=system,
        os_family=family,
        os_version=version,
    )


class VariableStore(Mapping[str, str]):
    """
    Read-only variable name -> value mapping.

    Unknown names are reported as missing; there are no defaults.
    """

    def __init__(self, variables: Mapping[str, str]):
        self._variables = dict(variables)

    def lookup(self, name: str) -> tuple[Optional[str], bool]:
        """Return (value, True), or (None, False) for an unknown name."""
        if name in self._variables:
            return self._variables[name], True
        return None, False

    def __getitem__(self, name: str) -> str:
        return self._variables[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._variables)

    def __len__(self) -> int:
        return len(self._variables)

    def __repr__(self) -> str:
        return f"VariableStore({self._variables!r})"


def gather(
    settings: Optional[Settings] = None,
    agent: Optional[AgentInfo] = None,
    host: Optional[HostInfo] = None,
) -> VariableStore:
    """
    Collect the variables available to constraints.

    Args:
        settings: Settings for agent facts; read from the environment if None
        agent: Agent facts; loaded from `settings` if None
        host: Host facts; read from the running system if None

    Raises:
        HostFactsError: If host facts cannot be read
    """
    if agent is None:
        agent = AgentInfo.load(settings or Settings.from_env())
    if host is None:
        host = host_info()

    return VariableStore({
        AGENT_ID: agent.agent_id,
        AGENT_VERSION: agent.version,
        HOST_ARCHITECTURE: host.architecture,
        OS_FAMILY: host.os_name,
        OS_KERNEL: host.kernel_version,
        OS_PLATFORM: host.os_family,
        OS_VERSION: host.os_version,
    })
