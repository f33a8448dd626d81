from accounting_gateway.config.settings import GatewayConfig

__all__ = ["GatewayConfig"]
