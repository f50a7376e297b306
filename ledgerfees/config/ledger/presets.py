"""
Ledger configuration presets.
"""

from ledgerfees.core.exceptions import ConfigurationError
from .config import LedgerConfig, LedgerNetwork


def get_ledger_preset(preset_name: str) -> LedgerConfig:
    """
    Get a predefined ledger configuration preset.

    Parameters
    ----------
    preset_name : str
        Name of the preset ('mainnet', 'testnet', 'previewnet', 'local')

    Returns
    -------
    LedgerConfig
        The configuration preset

    Raises
    ------
    ConfigurationError
        If preset_name is not recognized
    """
    presets = {
        'mainnet': lambda: LedgerConfig(network=LedgerNetwork.MAINNET),
        'testnet': lambda: LedgerConfig(network=LedgerNetwork.TESTNET),
        'previewnet': lambda: LedgerConfig(network=LedgerNetwork.PREVIEWNET),
        # Local nodes accept whatever the node is configured with
        'local': lambda: LedgerConfig(network=LedgerNetwork.LOCAL, enforce_fee_limit=False),
    }

    if preset_name not in presets:
        raise ConfigurationError(
            "preset", preset_name, f"unknown ledger preset, available: {list_available_ledger_presets()}"
        )

    return presets[preset_name]()


def list_available_ledger_presets() -> list[str]:
    return ['mainnet', 'testnet', 'previewnet', 'local']
