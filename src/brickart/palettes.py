# Brick colors as (name, hex) pairs. Order is the lookup tie-break order.
BRICK_COLORS = [
    ("Bright Red", "#C91A09"),
    ("Bright Blue", "#0055BF"),
    ("Bright Yellow", "#F2CD37"),
    ("Dark Green", "#287F46"),
    ("Bright Orange", "#FE8A18"),
    ("Medium Lavender", "#AC78BA"),
    ("White", "#F2F3F2"),
    ("Black", "#05131D"),
    ("Dark Tan", "#958A73"),
    ("Medium Blue", "#5A93DB"),
    ("Bright Green", "#4B9F4A"),
    ("Dark Orange", "#A95500"),
    ("Light Purple", "#E4ADC8"),
    ("Sand Blue", "#6074A1"),
    ("Dark Red", "#720E0F"),
    ("Lime", "#BBE90B"),
    ("Medium Azur", "#36AEBF"),
    ("Dark Brown", "#352100"),
    ("Light Bluish Gray", "#A0A5A9"),
    ("Dark Bluish Gray", "#6C6E68"),
]

# Pure black and white, handy for tests and two-tone output
MONOCHROME = [
    ("Black", "#000000"),
    ("White", "#FFFFFF"),
]
