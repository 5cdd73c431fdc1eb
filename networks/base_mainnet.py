from networks.dto import DexContract, NetworkConfig, NetworkProvider, TokenAddresses


base_mainnet = NetworkConfig(
    name="baseMainnet",
    token_addresses=TokenAddresses(
        wnative="",
        usdt="",
        usdc="",
        busd="",
        doo_doo="",
    ),
    dex_contract=DexContract(
        factory="",  # Dackie
        router="",  # Dackie
    ),
    dex_routers=(
        "",  # Dackie
        "",  # BeagleRouter
    ),
    network_provider=NetworkProvider(
        rpc_url="https://mainnet.base.org",
        scan_url="https://basescan.org",
    ),
)
