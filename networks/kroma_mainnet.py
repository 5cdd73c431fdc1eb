from networks.dto import DexContract, NetworkConfig, NetworkProvider, TokenAddresses


kroma_mainnet = NetworkConfig(
    name="kromaMainnet",
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
        rpc_url="https://api.kroma.network",
        scan_url="https://kromascan.com",
    ),
)
