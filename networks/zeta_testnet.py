from networks.dto import DexContract, NetworkConfig, NetworkProvider, TokenAddresses


zeta_testnet = NetworkConfig(
    name="zetaTestnet",
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
        rpc_url="https://zetachain-athens-evm.blockpi.network/v1/rpc/public",
        scan_url="https://explorer.zetachain.com",
    ),
)
