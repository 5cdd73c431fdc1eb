from dataclasses import dataclass, fields

from pydantic import HttpUrl, TypeAdapter, ValidationError

from enums.token import TokenSymbol
from utils.utils import checksum, is_configured


_http_url = TypeAdapter(HttpUrl)


@dataclass(frozen=True)
class TokenAddresses:
    wnative: str = ""
    usdt: str = ""
    usdc: str = ""
    busd: str = ""  # DOO DOO on testnets
    doo_doo: str = ""

    def get(self, symbol: TokenSymbol | str) -> str:
        try:
            symbol = TokenSymbol(symbol)
        except ValueError:
            raise KeyError(symbol) from None
        return getattr(self, symbol.name.lower())

    def to_dict(self) -> dict[str, str]:
        return {symbol.value: self.get(symbol) for symbol in TokenSymbol}


@dataclass(frozen=True)
class DexContract:
    factory: str = ""
    router: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "factory": self.factory,
            "router": self.router,
        }


@dataclass(frozen=True)
class NetworkProvider:
    rpc_url: str
    scan_url: str

    def __post_init__(self):
        for field in fields(self):
            value = getattr(self, field.name)
            if not is_configured(value):
                # whitespace-only counts as unset
                object.__setattr__(self, field.name, "")
                continue
            if "://" not in value or any(ch.isspace() or not ch.isprintable() for ch in value):
                raise ValueError(f"Malformed {field.name}: {value!r}")
            try:
                _http_url.validate_python(value)
            except ValidationError as e:
                raise ValueError(f"Malformed {field.name}: {value!r}") from e

    def to_dict(self) -> dict[str, str]:
        return {
            "rpcUrl": self.rpc_url,
            "scanUrl": self.scan_url,
        }


@dataclass(frozen=True)
class NetworkConfig:
    name: str
    token_addresses: TokenAddresses
    dex_contract: DexContract
    # priority order
    dex_routers: tuple[str, ...]
    network_provider: NetworkProvider

    def __post_init__(self):
        if isinstance(self.dex_routers, str):
            raise TypeError(f"dex_routers must be a sequence of addresses, not str {self.dex_routers!r}")
        if not isinstance(self.dex_routers, tuple):
            object.__setattr__(self, "dex_routers", tuple(self.dex_routers))

    def token_address(self, symbol: TokenSymbol | str) -> str | None:
        address = self.token_addresses.get(symbol)
        if not is_configured(address):
            return None

        return checksum(address)

    def routers(self) -> list[str]:
        return [checksum(router) for router in self.dex_routers if is_configured(router)]

    def to_dict(self) -> dict:
        return {
            "tokenAddresses": self.token_addresses.to_dict(),
            "dexContract": self.dex_contract.to_dict(),
            "dexRouters": list(self.dex_routers),
            "networkProvider": self.network_provider.to_dict(),
        }
