"""Unit tables for every supported measurement category.

Each category lists its units in presentation order (most common first) with
the factor that converts one of the unit into the category's base unit.
"""

from __future__ import annotations

import math

from unitconv_mcp.models.types import Category, UnitDefinition

PI = math.pi


def _unit(
    code: str,
    display_name: str,
    factor: float,
    *aliases: str,
    offset: float = 0.0,
    description: str = "",
) -> UnitDefinition:
    return UnitDefinition(
        code=code,
        display_name=display_name,
        to_base_factor=factor,
        affine_offset=offset,
        aliases=aliases,
        description=description,
    )


VOLUME = Category(
    id="volume",
    name="Volume",
    base_unit="liter",
    allow_negative=False,
    units=(
        # Metric SI
        _unit("milliliter", "Milliliter (mL)", 0.001, "millilitre", "ml",
              description="1/1,000 liter - small volumes"),
        _unit("liter", "Liter (L)", 1.0, "litre",
              description="Base metric unit of volume"),
        _unit("cubicMeter", "Cubic Meter (m³)", 1000.0, "cubic meter",
              description="1,000 liters - large volumes"),
        _unit("cubicCentimeter", "Cubic Centimeter (cm³)", 0.001, "cubic centimeter", "cc", "cm3",
              description="1 mL - equivalent to milliliter"),
        _unit("cubicDecimeter", "Cubic Decimeter (dm³)", 1.0, "cubic decimeter", "dm3",
              description="1 liter - equivalent to liter"),
        # US customary
        _unit("teaspoon", "Teaspoon (tsp)", 0.00492892, "tsp",
              description="5 mL - US cooking measurement"),
        _unit("tablespoon", "Tablespoon (tbsp)", 0.0147868, "tbsp",
              description="15 mL - US cooking measurement"),
        _unit("usFluidOunce", "US Fluid Ounce (fl oz)", 0.0295735, "US fluid ounce", "fl oz US",
              description="29.57 mL - US liquid volume"),
        _unit("usCup", "US Cup (cup)", 0.236588, "US cup", "cup US",
              description="236.59 mL - US cooking measurement"),
        _unit("usPint", "US Pint (pt)", 0.473176, "US pint", "pt US",
              description="473.18 mL - US liquid volume"),
        _unit("usQuart", "US Quart (qt)", 0.946353, "US quart", "qt US",
              description="946.35 mL - US liquid volume"),
        _unit("usGallon", "US Gallon (gal)", 3.78541, "US gallon", "gallon", "gal US",
              description="3.785 L - US liquid volume"),
        _unit("usBarrel", "US Barrel (bbl)", 119.24, "US barrel", "bbl",
              description="119.24 L - US fluid barrel"),
        # US cubic
        _unit("cubicInch", "Cubic Inch (in³)", 0.0163871, "cubic inch", "in3",
              description="16.39 mL - US cubic volume"),
        _unit("cubicFoot", "Cubic Foot (ft³)", 28.3168, "cubic foot", "ft3",
              description="28.32 L - US cubic volume"),
        _unit("cubicYard", "Cubic Yard (yd³)", 764.555, "cubic yard", "yd3",
              description="764.55 L - US cubic volume"),
        # Imperial (UK)
        _unit("imperialFluidOunce", "Imperial Fluid Ounce (fl oz UK)", 0.0284131,
              "Imperial fluid ounce", "fl oz UK",
              description="28.41 mL - UK liquid volume"),
        _unit("imperialCup", "Imperial Cup (cup UK)", 0.284131, "Imperial cup", "cup UK",
              description="284.13 mL - UK cooking measurement"),
        _unit("imperialPint", "Imperial Pint (pt UK)", 0.568261, "Imperial pint", "pt UK",
              description="568.26 mL - UK liquid volume"),
        _unit("imperialQuart", "Imperial Quart (qt UK)", 1.13652, "Imperial quart", "qt UK",
              description="1.137 L - UK liquid volume"),
        _unit("imperialGallon", "Imperial Gallon (gal UK)", 4.54609, "Imperial gallon", "gal UK",
              description="4.546 L - UK liquid volume"),
        # Very large
        _unit("cubicKilometer", "Cubic Kilometer (km³)", 1e12, "cubic kilometer", "km3",
              description="10^12 liters - reservoirs, geology"),
    ),
)

PLANE_ANGLE = Category(
    id="planeAngle",
    name="Plane Angle",
    base_unit="radian",
    units=(
        _unit("degree", "Degree (°)", PI / 180, "deg",
              description="1/360 of a full rotation - most common unit"),
        _unit("radian", "Radian (rad)", 1.0, "rad",
              description="SI unit - mathematical standard"),
        _unit("gradian", "Gradian (grad)", PI / 200, "grad",
              description="1/400 of a full rotation - metric system"),
        _unit("minuteOfArc", "Minute of Arc (')", PI / (180 * 60), "minute of arc", "arcmin", "'",
              description="1/60 of a degree - angular measurement"),
        _unit("secondOfArc", "Second of Arc (\")", PI / (180 * 3600), "second of arc", "arcsec", '"',
              description="1/60 of a minute - precise angular measurement"),
        _unit("milliradian", "Milliradian (mrad)", 0.001, "mrad",
              description="1/1000 of a radian - military/navigation"),
        _unit("turn", "Turn/Revolution", 2 * PI, "revolution", "rev",
              description="360° = 1 full rotation"),
        _unit("quadrant", "Quadrant", PI / 2,
              description="90° = 1/4 of a circle"),
        _unit("sextant", "Sextant", PI / 3,
              description="60° = 1/6 of a circle"),
        _unit("octant", "Octant", PI / 4,
              description="45° = 1/8 of a circle"),
    ),
)

LENGTH = Category(
    id="length",
    name="Length",
    base_unit="meter",
    allow_negative=False,
    units=(
        _unit("nanometer", "Nanometer (nm)", 1e-9, "nm"),
        _unit("micrometer", "Micrometer (μm)", 1e-6, "um", "μm"),
        _unit("millimeter", "Millimeter (mm)", 0.001, "mm"),
        _unit("centimeter", "Centimeter (cm)", 0.01, "cm"),
        _unit("decimeter", "Decimeter (dm)", 0.1, "dm"),
        _unit("meter", "Meter (m)", 1.0, "m"),
        _unit("kilometer", "Kilometer (km)", 1000.0, "km"),
        _unit("inch", "Inch (in)", 0.0254, "in"),
        _unit("foot", "Foot (ft)", 0.3048, "ft"),
        _unit("yard", "Yard (yd)", 0.9144, "yd"),
        _unit("mile", "Mile (mi)", 1609.344, "mi"),
        _unit("nauticalMile", "Nautical Mile (nmi)", 1852.0, "nmi"),
        _unit("lightYear", "Light Year (ly)", 9.461e15, "ly"),
        _unit("astronomicalUnit", "Astronomical Unit (AU)", 1.496e11, "AU"),
        _unit("parsec", "Parsec (pc)", 3.086e16, "pc"),
    ),
)

MASS = Category(
    id="mass",
    name="Mass",
    base_unit="kilogram",
    allow_negative=False,
    units=(
        _unit("milligram", "Milligram (mg)", 1e-6, "mg"),
        _unit("gram", "Gram (g)", 0.001, "g"),
        _unit("kilogram", "Kilogram (kg)", 1.0, "kg"),
        _unit("metricTon", "Metric Ton (t)", 1000.0, "tonne", "t"),
        _unit("ounce", "Ounce (oz)", 0.028349523125, "oz"),
        _unit("pound", "Pound (lb)", 0.45359237, "pounds", "lb"),
        _unit("stone", "Stone (st)", 6.35029318, "st"),
    ),
)

# Kelvin is the base; Celsius and Fahrenheit are affine.
TEMPERATURE = Category(
    id="temperature",
    name="Temperature",
    base_unit="kelvin",
    units=(
        _unit("celsius", "Celsius (°C)", 1.0, "celcius", "C", offset=273.15,
              description="Metric temperature scale"),
        _unit("fahrenheit", "Fahrenheit (°F)", 5 / 9, "farenheit", "F", offset=459.67 * 5 / 9,
              description="Imperial temperature scale"),
        _unit("kelvin", "Kelvin (K)", 1.0, "K",
              description="Absolute temperature scale"),
        _unit("rankine", "Rankine (°R)", 5 / 9, "R",
              description="Absolute Fahrenheit scale"),
    ),
)

AREA = Category(
    id="area",
    name="Area",
    base_unit="squareMeter",
    allow_negative=False,
    units=(
        _unit("squareMillimeter", "Square Millimeter (mm²)", 1e-6, "square millimeter", "mm2", "mm²",
              description="1/1,000,000 m² - tiny areas"),
        _unit("squareCentimeter", "Square Centimeter (cm²)", 1e-4, "square centimeter", "cm2", "cm²",
              description="1/10,000 m² - small areas"),
        _unit("squareMeter", "Square Meter (m²)", 1.0, "square meter", "m2", "m²",
              description="Base metric unit of area"),
        _unit("squareKilometer", "Square Kilometer (km²)", 1e6, "square kilometer", "km2", "km²",
              description="1,000,000 m² - large areas"),
        _unit("hectare", "Hectare (ha)", 1e4, "ha",
              description="10,000 m² - land areas"),
        _unit("are", "Are (a)", 100.0, "a",
              description="100 m² - land areas"),
        _unit("squareInch", "Square Inch (in²)", 0.00064516, "square inch", "in2", "in²",
              description="6.45 cm² - small areas"),
        _unit("squareFoot", "Square Foot (ft²)", 0.092903, "square foot", "ft2", "ft²",
              description="0.093 m² - room areas"),
        _unit("squareYard", "Square Yard (yd²)", 0.836127, "square yard", "yd2", "yd²",
              description="0.836 m² - yard areas"),
        _unit("acre", "Acre", 4046.86,
              description="4,047 m² - land areas"),
        _unit("squareMile", "Square Mile (mi²)", 2589988.11, "square mile", "mi2", "mi²",
              description="2.59 km² - large land areas"),
    ),
)

DATA_STORAGE = Category(
    id="dataStorage",
    name="Data Storage",
    base_unit="byte",
    allow_negative=False,
    units=(
        _unit("bit", "Bit (b)", 1 / 8),
        _unit("nibble", "Nibble", 0.5),
        _unit("byte", "Byte (B)", 1.0),
        # Decimal (SI, 1000-based)
        _unit("kilobyte", "Kilobyte (KB)", 1e3),
        _unit("megabyte", "Megabyte (MB)", 1e6),
        _unit("gigabyte", "Gigabyte (GB)", 1e9),
        _unit("terabyte", "Terabyte (TB)", 1e12),
        _unit("petabyte", "Petabyte (PB)", 1e15),
        _unit("exabyte", "Exabyte (EB)", 1e18),
        _unit("zettabyte", "Zettabyte (ZB)", 1e21),
        _unit("yottabyte", "Yottabyte (YB)", 1e24),
        # Binary (IEC, 1024-based)
        _unit("kibibyte", "Kibibyte (KiB)", float(2 ** 10)),
        _unit("mebibyte", "Mebibyte (MiB)", float(2 ** 20)),
        _unit("gibibyte", "Gibibyte (GiB)", float(2 ** 30)),
        _unit("tebibyte", "Tebibyte (TiB)", float(2 ** 40)),
        _unit("pebibyte", "Pebibyte (PiB)", float(2 ** 50)),
        _unit("exbibyte", "Exbibyte (EiB)", float(2 ** 60)),
        _unit("zebibyte", "Zebibyte (ZiB)", float(2 ** 70)),
        _unit("yobibyte", "Yobibyte (YiB)", float(2 ** 80)),
    ),
)

POWER = Category(
    id="power",
    name="Power",
    base_unit="watt",
    units=(
        _unit("milliwatt", "Milliwatt (mW)", 0.001,
              description="0.001 watts - small electronics"),
        _unit("watt", "Watt (W)", 1.0,
              description="Basic SI unit of power"),
        _unit("kilowatt", "Kilowatt (kW)", 1e3,
              description="1,000 watts - household/utility"),
        _unit("megawatt", "Megawatt (MW)", 1e6,
              description="1,000,000 watts - power plants"),
        _unit("gigawatt", "Gigawatt (GW)", 1e9,
              description="1,000,000,000 watts - large power plants"),
        _unit("horsepower", "Horsepower (hp)", 745.699872,
              description="745.7 watts - engines, motors"),
        _unit("metricHorsepower", "Metric Horsepower (PS)", 735.49875,
              description="735.5 watts - European standard"),
        _unit("btuPerHour", "BTU per Hour (BTU/h)", 0.29307107,
              description="0.293 watts - heating/cooling"),
        _unit("footPoundPerSecond", "Foot-Pound per Second (ft·lbf/s)", 1.355817948,
              description="1.356 watts - mechanical power"),
        _unit("caloriePerSecond", "Calorie per Second (cal/s)", 4.184,
              description="4.184 watts - thermal power"),
    ),
)

PRESSURE = Category(
    id="pressure",
    name="Pressure",
    base_unit="pascal",
    units=(
        _unit("pascal", "Pascal (Pa)", 1.0,
              description="Basic SI unit of pressure"),
        _unit("kilopascal", "Kilopascal (kPa)", 1e3,
              description="1,000 pascals - common metric unit"),
        _unit("megapascal", "Megapascal (MPa)", 1e6,
              description="1,000,000 pascals - high pressure"),
        _unit("bar", "Bar (bar)", 1e5,
              description="100,000 pascals - meteorology, engineering"),
        _unit("millibar", "Millibar (mbar)", 100.0,
              description="0.001 bar - weather, atmospheric pressure"),
        _unit("hectopascal", "Hectopascal (hPa)", 100.0,
              description="100 pascals - equal to millibar"),
        _unit("atm", "Atmosphere (atm)", 101325.0, "atmosphere",
              description="101,325 Pa - standard atmospheric pressure"),
        _unit("technicalAtmosphere", "Technical Atmosphere (at)", 98066.5, "at",
              description="98,066.5 Pa - metric system"),
        _unit("psi", "Pounds per Square Inch (psi)", 6894.76, "poundPerSquareInch",
              description="6,894.76 Pa - US standard"),
        _unit("psf", "Pounds per Square Foot (psf)", 47.8803, "poundPerSquareFoot",
              description="47.88 Pa - US engineering"),
        _unit("torr", "Torr (torr)", 133.322,
              description="133.322 Pa - vacuum, mmHg equivalent"),
        _unit("millimeterOfMercury", "Millimeter of Mercury (mmHg)", 133.322, "mmHg",
              description="133.322 Pa - medical, barometric"),
        _unit("inchOfMercury", "Inch of Mercury (inHg)", 3386.39, "inHg",
              description="3,386.39 Pa - aviation, weather"),
        _unit("inchOfWater", "Inch of Water (inH2O)", 249.089, "inH2O",
              description="249.089 Pa - low pressure systems"),
        _unit("millimeterOfWater", "Millimeter of Water (mmH2O)", 9.80665, "mmH2O",
              description="9.80665 Pa - precise low pressure"),
    ),
)

SPEED = Category(
    id="speed",
    name="Speed",
    base_unit="meterPerSecond",
    units=(
        _unit("meterPerSecond", "Meter per Second (m/s)", 1.0, "meter per second"),
        _unit("kilometerPerHour", "Kilometer per Hour (km/h)", 1000 / 3600, "kilometer per hour"),
        _unit("milePerHour", "Mile per Hour (mph)", 1609.344 / 3600, "miles per hour", "mph"),
        _unit("footPerSecond", "Foot per Second (ft/s)", 0.3048, "foot per second"),
        _unit("knot", "Knot (kn)", 1852 / 3600, "kn"),
        _unit("nauticalMilePerHour", "Nautical Mile per Hour", 1852 / 3600),
        _unit("kilometerPerSecond", "Kilometer per Second (km/s)", 1000.0),
        _unit("milePerSecond", "Mile per Second (mi/s)", 1609.344),
        _unit("footPerMinute", "Foot per Minute (ft/min)", 0.3048 / 60),
        _unit("inchPerSecond", "Inch per Second (in/s)", 0.0254),
        _unit("yardPerSecond", "Yard per Second (yd/s)", 0.9144),
        _unit("mach", "Mach (at sea level)", 343.0,
              description="Speed of sound at sea level"),
        _unit("speedOfLight", "Speed of Light (c)", 299792458.0),
    ),
)

ENERGY = Category(
    id="energy",
    name="Energy",
    base_unit="joule",
    units=(
        _unit("joule", "Joule (J)", 1.0, "J"),
        _unit("kilojoule", "Kilojoule (kJ)", 1e3, "kJ"),
        _unit("gramcalorie", "Gram Calorie (cal)", 4.184, "cal"),
        _unit("kilocalorie", "Kilocalorie (kcal)", 4184.0, "kcal"),
        _unit("footpound", "Foot-Pound (ft·lbf)", 1.3558179483),
        _unit("wattHour", "Watt Hour (Wh)", 3600.0, "Wh"),
        _unit("kilowattHour", "Kilowatt Hour (kWh)", 3.6e6, "kWh"),
    ),
)

TIME = Category(
    id="time",
    name="Time",
    base_unit="second",
    units=(
        _unit("millisecond", "Millisecond (ms)", 0.001, "ms"),
        _unit("second", "Second (s)", 1.0, "s"),
        _unit("minute", "Minute (min)", 60.0, "min"),
        _unit("hour", "Hour (h)", 3600.0, "h"),
        _unit("day", "Day (d)", 86400.0, "d"),
        _unit("week", "Week (wk)", 604800.0, "wk"),
    ),
)

DEFAULT_CATEGORIES: tuple[Category, ...] = (
    VOLUME,
    PLANE_ANGLE,
    LENGTH,
    MASS,
    TEMPERATURE,
    AREA,
    DATA_STORAGE,
    POWER,
    PRESSURE,
    SPEED,
    ENERGY,
    TIME,
)
