import logging

from networks.dto import NetworkConfig
from networks.exceptions import NetworkNotFoundError


module_logger = logging.getLogger(__name__)


class NetworkRegistry:
    def __init__(self, networks: list[NetworkConfig]):
        self._networks: dict[str, NetworkConfig] = {}
        for cfg in networks:
            if cfg.name in self._networks:
                raise ValueError(f"Network {cfg.name} already registered")
            self._networks[cfg.name] = cfg
            module_logger.debug(f"Registered network -> {cfg.name}")

    def get(self, network_id: str) -> NetworkConfig:
        cfg = self._networks.get(network_id)
        if cfg is None:
            module_logger.warning(f"Lookup of unknown network {network_id!r}")
            raise NetworkNotFoundError(network_id, self.list())
        return cfg

    def list(self) -> list[str]:
        return list(self._networks)

    def __contains__(self, network_id: object) -> bool:
        return network_id in self._networks

    def __len__(self) -> int:
        return len(self._networks)
