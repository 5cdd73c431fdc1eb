from config import settings
from networks.dto import NetworkConfig
from networks.exceptions import NetworkNotFoundError
from networks.registery import NetworkRegistry
from networks.base_mainnet import base_mainnet
from networks.kroma_mainnet import kroma_mainnet
from networks.zeta_testnet import zeta_testnet


registery = NetworkRegistry([base_mainnet, kroma_mainnet, zeta_testnet])


def current() -> NetworkConfig:
    return registery.get(settings.NETWORK)
