# config/dictionaries/seed_data.py
# (code, name, [(state code, state name), ...])

COUNTRIES = [
    ("AT", "Austria", [
        ("1", "Burgenland"),
        ("2", "Kärnten"),
        ("3", "Niederösterreich"),
        ("4", "Oberösterreich"),
        ("5", "Salzburg"),
        ("6", "Steiermark"),
        ("7", "Tirol"),
        ("8", "Vorarlberg"),
        ("9", "Wien"),
    ]),
    ("CZ", "Czechia", []),
    ("DE", "Germany", [
        ("BW", "Baden-Württemberg"),
        ("BY", "Bayern"),
        ("BE", "Berlin"),
        ("HH", "Hamburg"),
        ("HE", "Hessen"),
        ("NW", "Nordrhein-Westfalen"),
        ("SN", "Sachsen"),
    ]),
    ("HU", "Hungary", []),
    ("IN", "India", [
        ("DL", "Delhi"),
        ("KA", "Karnataka"),
        ("MH", "Maharashtra"),
        ("TN", "Tamil Nadu"),
        ("UP", "Uttar Pradesh"),
    ]),
    ("PL", "Poland", []),
    ("SK", "Slovakia", []),
    ("US", "United States", [
        ("CA", "California"),
        ("FL", "Florida"),
        ("IL", "Illinois"),
        ("NY", "New York"),
        ("TX", "Texas"),
        ("WA", "Washington"),
    ]),
]
