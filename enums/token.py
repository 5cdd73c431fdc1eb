from enum import Enum


class TokenSymbol(str, Enum):
    WNATIVE = "WNATIVE"
    USDT = "USDT"
    USDC = "USDC"
    BUSD = "BUSD"
    DOO_DOO = "DOO_DOO"
