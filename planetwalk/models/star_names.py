"""Ordered table of star names placed by the galaxy generator.

Generation walks this table front to back, so changing the order (or
inserting names anywhere but the end) changes every galaxy built from an
existing seed.
"""

STAR_NAMES: tuple[str, ...] = (
    "Sirius", "Canopus", "Arcturus", "Rigil Kentaurus", "Vega",
    "Capella", "Rigel", "Procyon", "Achernar", "Betelgeuse",
    "Hadar", "Altair", "Acrux", "Aldebaran", "Antares",
    "Spica", "Pollux", "Fomalhaut", "Deneb", "Mimosa",
    "Regulus", "Adhara", "Castor", "Gacrux", "Shaula",
    "Bellatrix", "Elnath", "Miaplacidus", "Alnilam", "Alnair",
    "Alnitak", "Alioth", "Dubhe", "Mirfak", "Wezen",
    "Sargas", "Kaus Australis", "Avior", "Alkaid", "Menkalinan",
    "Atria", "Alhena", "Peacock", "Alsephina", "Mirzam",
    "Alphard", "Polaris", "Hamal", "Algieba", "Diphda",
    "Mizar", "Nunki", "Menkent", "Mirach", "Alpheratz",
    "Rasalhague", "Kochab", "Saiph", "Denebola", "Algol",
    "Tiaki", "Muhlifain", "Aspidiske", "Suhail", "Alphecca",
    "Mintaka", "Sadr", "Eltanin", "Schedar", "Naos",
    "Almach", "Caph", "Izar", "Dschubba", "Larawag",
    "Merak", "Ankaa", "Girtab", "Enif", "Scheat",
    "Sabik", "Phecda", "Aludra", "Markeb", "Navi",
    "Markab", "Aljanah", "Acrab", "Zosma", "Arneb",
    "Gienah", "Ascella", "Zubeneschamali", "Unukalhai", "Sheratan",
    "Kraz", "Ruchbah", "Vindemiatrix", "Algenib", "Albireo",
    "Thuban", "Alcyone", "Mebsuta", "Tarazed", "Alderamin",
    "Rasalgethi", "Zubenelgenubi", "Cor Caroli", "Alcor", "Alnasl",
)
