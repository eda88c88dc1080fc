"""Initial contents of the wines collection."""

from typing import Any, Dict, List

SEED_WINES: List[Dict[str, Any]] = [
    {
        "name": "Château de Saint Cosme",
        "year": 2009,
        "country": "France",
        "description": "Dark cherry and licorice on the nose, with a peppery Grenache finish.",
        "image": "/images/wines/saint_cosme.jpg",
        "price": 24.99,
    },
    {
        "name": "Lan Rioja Crianza",
        "year": 2006,
        "country": "Spain",
        "description": "Tempranillo aged in oak; vanilla, red plum and a soft, round body.",
        "image": "/images/wines/lan_rioja.jpg",
        "price": 14.5,
    },
    {
        "name": "Margerum Sybarite",
        "year": 2010,
        "country": "USA",
        "description": "Crisp Sauvignon Blanc with grapefruit, lemongrass and a mineral edge.",
        "image": "/images/wines/margerum.jpg",
        "price": 21.0,
    },
    {
        "name": "Owen Roe Ex Umbris",
        "year": 2009,
        "country": "USA",
        "description": "Syrah from Washington; smoked meat, blackberry and violets.",
        "image": "/images/wines/ex_umbris.jpg",
        "price": 27.0,
    },
    {
        "name": "Rex Hill Pinot Noir",
        "year": 2009,
        "country": "USA",
        "description": "Willamette Valley Pinot with bright raspberry and earthy spice.",
        "image": "/images/wines/rex_hill.jpg",
        "price": 32.0,
    },
    {
        "name": "Viticcio Classico Riserva",
        "year": 2007,
        "country": "Italy",
        "description": "Chianti Classico with sour cherry, leather and firm tannins.",
        "image": "/images/wines/viticcio.jpg",
        "price": 29.95,
    },
    {
        "name": "Bodega Lurton Pinot Gris",
        "year": 2011,
        "country": "Argentina",
        "description": "Fresh and floral, pear and white peach over a light body.",
        "image": "/images/wines/bodega_lurton.jpg",
        "price": 11.99,
    },
    {
        "name": "Les Morizottes",
        "year": 2009,
        "country": "France",
        "description": "Burgundy Chardonnay; toasted hazelnut, butter and citrus.",
        "image": "/images/wines/morizottes.jpg",
        "price": 38.0,
    },
    {
        "name": "Domaine Serene Evenstad Reserve",
        "year": 2007,
        "country": "USA",
        "description": "Layered Pinot Noir with black cherry, cola and a long finish.",
        "image": "/images/wines/domaine_serene.jpg",
        "price": 55.0,
    },
    {
        "name": "Block Nine Caiden's Vineyards",
        "year": 2009,
        "country": "USA",
        "description": "Easygoing Pinot Noir with strawberry, cranberry and a touch of oak.",
        "image": "/images/wines/block_nine.jpg",
        "price": 16.0,
    },
]
