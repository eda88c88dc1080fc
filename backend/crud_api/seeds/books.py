"""Initial contents of the books collection."""

from typing import Any, Dict, List

SEED_BOOKS: List[Dict[str, Any]] = [
    {
        "title": "The Left Hand of Darkness",
        "author": "Ursula K. Le Guin",
        "image": "/images/books/left_hand_of_darkness.jpg",
    },
    {
        "title": "Invisible Man",
        "author": "Ralph Ellison",
        "image": "/images/books/invisible_man.jpg",
    },
    {
        "title": "One Hundred Years of Solitude",
        "author": "Gabriel García Márquez",
        "image": "/images/books/one_hundred_years.jpg",
    },
    {
        "title": "Beloved",
        "author": "Toni Morrison",
        "image": "/images/books/beloved.jpg",
    },
    {
        "title": "The Master and Margarita",
        "author": "Mikhail Bulgakov",
        "image": "/images/books/master_and_margarita.jpg",
    },
    {
        "title": "Things Fall Apart",
        "author": "Chinua Achebe",
        "image": "/images/books/things_fall_apart.jpg",
    },
    {
        "title": "Frankenstein",
        "author": "Mary Shelley",
        "image": "/images/books/frankenstein.jpg",
    },
    {
        "title": "The Remains of the Day",
        "author": "Kazuo Ishiguro",
        "image": "/images/books/remains_of_the_day.jpg",
    },
    {
        "title": "Mrs Dalloway",
        "author": "Virginia Woolf",
        "image": "/images/books/mrs_dalloway.jpg",
    },
    {
        "title": "The Name of the Rose",
        "author": "Umberto Eco",
        "image": "/images/books/name_of_the_rose.jpg",
    },
]
