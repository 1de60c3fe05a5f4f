"""Built-in definitions table used by :func:`quantica.default_definitions`."""

DEFAULT_DEF_STRING = """
# Default quantica definitions.
#
#   prefix-  = value       = alias-
#   unit     = [dimension] = alias     (base unit)
#   unit     = expression  = alias     (derived unit)

# Decimal prefixes
yocto- = 1e-24 = y-
zepto- = 1e-21 = z-
atto-  = 1e-18 = a-
femto- = 1e-15 = f-
pico-  = 1e-12 = p-
nano-  = 1e-9  = n-
micro- = 1e-6  = u- = µ-
milli- = 1e-3  = m-
centi- = 1e-2  = c-
deci-  = 1e-1  = d-
deca-  = 1e1   = da- = deka-
hecto- = 1e2   = h-
kilo-  = 1e3   = k-
mega-  = 1e6   = M-
giga-  = 1e9   = G-
tera-  = 1e12  = T-
peta-  = 1e15  = P-
exa-   = 1e18  = E-
zetta- = 1e21  = Z-
yotta- = 1e24  = Y-

# Binary prefixes
kibi- = 2 ** 10 = Ki-
mebi- = 2 ** 20 = Mi-
gibi- = 2 ** 30 = Gi-
tebi- = 2 ** 40 = Ti-

# Base units
meter = [length] = m = metre
second = [time] = s = sec
gram = [mass] = g
ampere = [current] = A = amp
kelvin = [temperature] = K
mole = [substance] = mol
candela = [luminosity] = cd = candle
bit = [information]
radian = [] = rad
count = []

# Numbers
pi = 3.141592653589793 = π
percent = 0.01
dozen = 12

# Angle
turn = 2 * pi * radian = revolution = cycle
degree = pi / 180 * radian = deg = arcdeg
arcminute = degree / 60 = arcmin
arcsecond = arcminute / 60 = arcsec
steradian = radian ** 2 = sr

# Information
byte = 8 * bit = B = octet

# Length
angstrom = 1e-10 * meter = Å
foot = 0.3048 * meter = ft = feet
inch = foot / 12 = in = inches
yard = 3 * foot = yd
mile = 5280 * foot = mi
nautical_mile = 1852 * meter = nmi
astronomical_unit = 149597870700 * meter = au
light_year = 9460730472580800 * meter = ly

# Area
hectare = 10000 * meter ** 2 = ha
acre = 43560 * foot ** 2

# Volume
liter = decimeter ** 3 = l = L = litre
gallon = 231 * inch ** 3 = gal
quart = gallon / 4 = qt
pint = quart / 2 = pt
cup = pint / 2
fluid_ounce = cup / 8 = floz

# Time
minute = 60 * second = min
hour = 60 * minute = h = hr
day = 24 * hour
week = 7 * day
year = 365.25 * day = yr = julian_year

# Frequency
hertz = 1 / second = Hz
revolutions_per_minute = revolution / minute = rpm

# Mass
metric_ton = 1000 * kilogram = t = tonne
pound = 0.45359237 * kilogram = lb
ounce = pound / 16 = oz
stone = 14 * pound = st

# Acceleration
standard_gravity = 9.80665 * meter / second ** 2 = g_0

# Force
newton = kilogram * meter / second ** 2 = N
dyne = gram * centimeter / second ** 2 = dyn
pound_force = pound * standard_gravity = lbf
kilogram_force = kilogram * standard_gravity = kgf

# Energy
joule = newton * meter = J
erg = dyne * centimeter
calorie = 4.184 * joule = cal
electron_volt = 1.602176634e-19 * joule = eV

# Power
watt = joule / second = W
watt_hour = watt * hour = Wh
horsepower = 550 * foot * pound_force / second = hp

# Pressure
pascal = newton / meter ** 2 = Pa
bar = 1e5 * pascal
atmosphere = 101325 * pascal = atm
torr = atmosphere / 760
psi = pound_force / inch ** 2

# Electromagnetism
coulomb = ampere * second = C
volt = joule / coulomb = V
ohm = volt / ampere = Ω
siemens = ampere / volt = S
farad = coulomb / volt = F
weber = volt * second = Wb
tesla = weber / meter ** 2 = T
henry = weber / ampere = H

# Speed
knot = nautical_mile / hour = kt
mile_per_hour = mile / hour = mph
kilometer_per_hour = kilometer / hour = kph
"""
