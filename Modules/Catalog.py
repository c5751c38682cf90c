from Modules.models import CatalogEntry

DISCOVER_MOVIES = [
    CatalogEntry(
        id="disc-1",
        title="Inception",
        year=2010,
        genres=["Sci-Fi", "Thriller"],
        description="A thief who steals corporate secrets through the use of dream-sharing technology "
                    "is given a chance at redemption.",
        image_url="https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcTmaTHAbTa2MTEGM_PwqBU61jEzjEcQfx-Zb39fyctMdZheq2Uj",
    ),
    CatalogEntry(
        id="disc-2",
        title="The Dark Knight",
        year=2008,
        genres=["Action", "Crime"],
        description="Batman faces the Joker, a criminal mastermind who plunges Gotham into chaos.",
        image_url="https://encrypted-tbn1.gstatic.com/images?q=tbn:ANd9GcR2Cghv6inVgiEL-vAYFJg8Rff175LiNaWKzV4tytSLG6D0c2n_",
    ),
    CatalogEntry(
        id="disc-3",
        title="La La Land",
        year=2016,
        genres=["Romance", "Drama", "Musical"],
        description="A jazz musician and an aspiring actress try to make it in Los Angeles "
                    "while navigating love and ambition.",
        image_url="https://theposterdepot.com/cdn/shop/products/lala-land-poster-1120201602_d2a246ae-5c6e-44ca-8904-ba83fce4fe20_1024x1024@2x.jpg?v=1549386938",
    ),
    CatalogEntry(
        id="disc-4",
        title="Spirited Away",
        year=2001,
        genres=["Animation", "Fantasy"],
        description="A young girl enters a world of spirits and must save her parents and find her way back.",
        image_url="https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcTlyek7tCF3dXq_2y6E5NGajum2a_s8clAIu6WrdOxsO_Drmi04",
    ),
]


def get_entry(entry_id):
    return next((m for m in DISCOVER_MOVIES if m.id == entry_id), None)
