import pandas as pd

from Modules.Analytics_Utils import records_to_df
from Modules.models import HAVE_WATCHED, PLAN_TO_WATCH, STATUS_LABELS


def get_list_stats(movies):
    """Summarises the cached list: counts per status, average personal rating, rating and status breakdowns."""
    df = records_to_df(movies)

    if df.empty:
        return {
            "total": 0,
            "planned": 0,
            "watched": 0,
            "avg_rating": None,
            "rating_dist": pd.DataFrame(columns=["rating", "count"]),
            "status_dist": pd.DataFrame(columns=["status", "count"]),
        }

    watched = df[df["status"] == HAVE_WATCHED]
    rated = watched.dropna(subset=["rating"])

    rating_dist = (
        rated["rating"].astype(int).value_counts()
        .reindex(range(1, 6), fill_value=0)
        .rename_axis("rating").reset_index(name="count")
    )

    status_dist = (
        df["status"].map(lambda s: STATUS_LABELS.get(s, s)).value_counts()
        .rename_axis("status").reset_index(name="count")
    )

    return {
        "total": len(df),
        "planned": int((df["status"] == PLAN_TO_WATCH).sum()),
        "watched": len(watched),
        "avg_rating": float(rated["rating"].mean()) if not rated.empty else None,
        "rating_dist": rating_dist,
        "status_dist": status_dist,
    }
