"""Units of measurement."""

from enum import StrEnum


class PowerUnit(StrEnum):
    WATT = "W"
    KILO_WATT = "kW"


class VoltUnit(StrEnum):
    VOLT = "V"


class EnergyUnit(StrEnum):
    WATT_HOUR = "Wh"
    KILO_WATT_HOUR = "kWh"


class ElectricalUnit(StrEnum):
    CURRENT_AMPERE = "A"
    VOLT_AMPERE = "VA"


class AngleUnit(StrEnum):
    DEGREE = "°"


class CurrencyUnit(StrEnum):
    EURO = "€"
    DOLLAR = "$"
    CENT = "¢"


class TempUnit(StrEnum):
    CELSIUS = "°C"
    FAHRENHEIT = "°F"
    KELVIN = "K"


class TimeUnit(StrEnum):
    MICROSECONDS = "μs"
    MILLISECONDS = "ms"
    SECONDS = "s"
    MINUTES = "min"
    HOURS = "h"
    DAYS = "d"
    WEEKS = "w"
    MONTHS = "m"
    YEARS = "y"


class LengthUnit(StrEnum):
    MILLIMETERS = "mm"
    CENTIMETERS = "cm"
    METERS = "m"
    KILOMETERS = "km"
    INCHES = "in"
    FEET = "ft"
    YARD = "yd"
    MILES = "mi"


class FrequencyUnit(StrEnum):
    HERTZ = "Hz"
    GIGA_HERTZ = "GHz"


class PressureUnit(StrEnum):
    PA = "Pa"
    HPA = "hPa"
    BAR = "bar"
    MBAR = "mbar"
    INHG = "inHg"
    PSI = "psi"


class VolumeUnit(StrEnum):
    LITERS = "L"
    MILLILITERS = "mL"
    CUBIC_METERS = "m³"
    CUBIC_FEET = "ft³"
    GALLONS = "gal"
    FLUID_OUNCE = "fl. oz."


class VolumeFlowRateUnit(StrEnum):
    CUBIC_METERS_PER_HOUR = "m³/h"
    CUBIC_FEET_PER_MINUTE = "ft³/m"


class AreaUnit(StrEnum):
    SQUARE_METERS = "m²"


class MassUnit(StrEnum):
    GRAMS = "g"
    KILOGRAMS = "kg"
    MILLIGRAMS = "mg"
    MICROGRAMS = "µg"
    OUNCES = "oz"
    POUNDS = "lb"


class ConductivityUnit(StrEnum):
    CONDUCTIVITY = "µS/cm"


class LightUnit(StrEnum):
    LUX = "lx"


class UvUnit(StrEnum):
    UV_INDEX = "UV index"


class PercentageUnit(StrEnum):
    PERCENTAGE = "%"


class IrradiationUnit(StrEnum):
    WATTS_PER_SQUARE_METER = "W/m²"


class PrecipitationUnit(StrEnum):
    MILLIMETERS_PER_HOUR = "mm/h"


class ConcentrationUnit(StrEnum):
    MICROGRAMS_PER_CUBIC_METER = "µg/m³"
    MILLIGRAMS_PER_CUBIC_METER = "mg/m³"
    PARTS_PER_CUBIC_METER = "p/m³"
    PARTS_PER_MILLION = "ppm"
    PARTS_PER_BILLION = "ppb"


class SpeedUnit(StrEnum):
    MILLIMETERS_PER_DAY = "mm/d"
    INCHES_PER_DAY = "in/d"
    METERS_PER_SECOND = "m/s"
    INCHES_PER_HOUR = "in/h"
    KILOMETERS_PER_HOUR = "km/h"
    MILES_PER_HOUR = "mph"


class SignalStrengthUnit(StrEnum):
    DECIBELS = "dB"
    DECIBELS_MILLIWATT = "dBm"


class DataUnit(StrEnum):
    BITS = "bit"
    KILOBITS = "kbit"
    MEGABITS = "Mbit"
    GIGABITS = "Gbit"
    BYTES = "B"
    KILOBYTES = "kB"
    MEGABYTES = "MB"
    GIGABYTES = "GB"
    TERABYTES = "TB"
    PETABYTES = "PB"
    EXABYTES = "EB"
    ZETTABYTES = "ZB"
    YOTTABYTES = "YB"
    KIBIBYTES = "KiB"
    MEBIBYTES = "MiB"
    GIBIBYTES = "GiB"
    TEBIBYTES = "TiB"
    PEBIBYTES = "PiB"
    EXBIBYTES = "EiB"
    ZEBIBYTES = "ZiB"
    YOBIBYTES = "YiB"


class DataRateUnit(StrEnum):
    BITS_PER_SECOND = "bit/s"
    KILOBITS_PER_SECOND = "kbit/s"
    MEGABITS_PER_SECOND = "Mbit/s"
    GIGABITS_PER_SECOND = "Gbit/s"
    BYTES_PER_SECOND = "B/s"
    KILOBYTES_PER_SECOND = "kB/s"
    MEGABYTES_PER_SECOND = "MB/s"
    GIGABYTES_PER_SECOND = "GB/s"
    KIBIBYTES_PER_SECOND = "KiB/s"
    MEBIBYTES_PER_SECOND = "MiB/s"
    GIBIBYTES_PER_SECOND = "GiB/s"


# Any unit of measurement; all families serialize to their symbol.
Unit = (
    PowerUnit
    | VoltUnit
    | EnergyUnit
    | ElectricalUnit
    | AngleUnit
    | CurrencyUnit
    | TempUnit
    | TimeUnit
    | LengthUnit
    | FrequencyUnit
    | PressureUnit
    | VolumeUnit
    | VolumeFlowRateUnit
    | AreaUnit
    | MassUnit
    | ConductivityUnit
    | LightUnit
    | UvUnit
    | PercentageUnit
    | IrradiationUnit
    | PrecipitationUnit
    | ConcentrationUnit
    | SpeedUnit
    | SignalStrengthUnit
    | DataUnit
    | DataRateUnit
)
