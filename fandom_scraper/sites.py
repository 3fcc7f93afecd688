# -*- coding: utf-8 -*-

"""
Built-in site table. Locators mirror the ``data-source`` attributes of each
wiki's character infobox template.
"""

from .schemas import DataSource, SchemaRegistry, SiteSchema

# Portable infobox <img> class on Fandom
INFOBOX_IMAGE_CLASS = "pi-image-thumbnail"

# -----------------------------
# Dragon Ball
# -----------------------------

DRAGON_BALL_EN = SiteSchema(
    name="dragon-ball",
    language="en",
    url="https://dragonball.fandom.com/wiki/",
    characters_url="https://dragonball.fandom.com/wiki/Characters",
    page_format="classic",
    data_source=DataSource(
        name="name",
        kanji="jname",
        romaji="rname",
        status="Status",
        species="Race",
        gender="Gender",
        images=INFOBOX_IMAGE_CLASS,
        birthday="Date of birth",
        height="Height",
        weight="Weight",
        affiliation="Allegiance",
        occupation="Occupation",
        relatives="FamConnect",
        manga="manga debut",
        anime="anime debut",
        voice_actor="Voice",
    ),
)

DRAGON_BALL_FR = SiteSchema(
    name="dragon-ball",
    language="fr",
    url="https://dragonball.fandom.com/fr/wiki/",
    characters_url="https://dragonball.fandom.com/fr/wiki/Catégorie:Personnages",
    page_format="classic",
    data_source=DataSource(
        name="nom",
        kanji="kanji",
        romaji="romaji",
        status="statut",
        species="race",
        gender="sexe",
        images=INFOBOX_IMAGE_CLASS,
        age="âge",
        birthday="naissance",
        height="taille",
        weight="poids",
        affiliation="affiliation",
        occupation="profession",
        relatives="famille",
        manga="manga",
        anime="anime",
        seiyu="seiyuu",
        voice_actor="vf",
    ),
)

# -----------------------------
# Death Note
# -----------------------------

DEATH_NOTE_EN = SiteSchema(
    name="death-note",
    language="en",
    url="https://deathnote.fandom.com/wiki/",
    characters_url="https://deathnote.fandom.com/wiki/Category:Manga_characters",
    page_format="classic",
    data_source=DataSource(
        name="name",
        kanji="kanji",
        romaji="romaji",
        status="status",
        gender="gender",
        images=INFOBOX_IMAGE_CLASS,
        age="age",
        birthday="birth",
        height="height",
        weight="weight",
        affiliation="affiliation",
        occupation="occupation",
        relatives="relatives",
        nationality="nationality",
        episode="episode",
        manga="manga",
        anime="anime",
        seiyu="seiyu",
        voice_actor="englishva",
    ),
)

DEATH_NOTE_FR = SiteSchema(
    name="death-note",
    language="fr",
    url="https://deathnote.fandom.com/fr/wiki/",
    characters_url="https://deathnote.fandom.com/fr/wiki/Cat%C3%A9gorie:Personnages",
    page_format="classic",
    data_source=DataSource(
        name="nom",
        kanji="kanji",
        romaji="romaji",
        status="statut",
        gender="sexe",
        images=INFOBOX_IMAGE_CLASS,
        age="âge",
        birthday="naissance",
        height="taille",
        weight="poids",
        affiliation="affiliation",
        occupation="profession",
        relatives="famille",
        nationality="nationalité",
        manga="manga",
        anime="anime",
        seiyu="seiyu",
        voice_actor="vf",
    ),
)

ALL_SCHEMAS = [DRAGON_BALL_EN, DRAGON_BALL_FR, DEATH_NOTE_EN, DEATH_NOTE_FR]


def build_default_registry() -> SchemaRegistry:
    return SchemaRegistry(ALL_SCHEMAS, frozen=True)


DEFAULT_REGISTRY = build_default_registry()
