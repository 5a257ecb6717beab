from dataclasses import dataclass


def base_hub_path(endpoint: str, hub_name: str) -> str:
    return f"{endpoint}/api/v1/hubs/{hub_name.lower()}"


@dataclass(frozen=True)
class HubEndpoint:
    base_uri: str
    hub_name: str

    def __post_init__(self) -> None:
        # Hub identity is case-insensitive on the service side
        object.__setattr__(self, "hub_name", self.hub_name.lower())

    @property
    def path(self) -> str:
        return base_hub_path(self.base_uri, self.hub_name)
