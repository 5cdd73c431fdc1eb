from eth_utils.address import is_address, to_checksum_address


def is_configured(address: str) -> bool:
    return bool(address and address.strip())


def checksum(address: str) -> str:
    if not is_address(address):
        raise ValueError(f"Invalid address: {address!r}")

    return to_checksum_address(address)
