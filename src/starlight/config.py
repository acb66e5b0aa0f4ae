"""Server settings for an App."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Where and how the app is served.

    The defaults are the service's fixed bind address, every interface on
    port 8090. Nothing is read from the environment.
    """

    host: str = "0.0.0.0"
    port: int = 8090
    debug: bool = False
    log_level: str = "info"
