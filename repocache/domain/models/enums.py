"""Domain enumerations for the sample asset catalogue.

All string-valued enums use str mixin so they serialize cleanly to JSON
and remain comparable to plain strings (Pydantic default behaviour).
"""

from enum import Enum


class AssetClass(str, Enum):
    EQUITY = "equity"
    FIXED_INCOME = "fixed_income"
    COMMODITY = "commodity"
    REAL_ESTATE = "real_estate"
    CASH = "cash"
    CRYPTO = "crypto"
    OTHER = "other"


class Geography(str, Enum):
    US = "us"
    DEVELOPED_EX_US = "developed_ex_us"
    EMERGING = "emerging"
    GLOBAL = "global"
