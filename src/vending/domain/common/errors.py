from __future__ import annotations


class MachineConfigurationError(Exception):
    pass


class InvalidConfigError(MachineConfigurationError):
    pass


class InvalidPriceTableError(MachineConfigurationError):
    pass


class InvalidPriceStepError(MachineConfigurationError):
    pass
