from Modules.models import HAVE_WATCHED, NewMovieForm, ReviewInput, valid_rating

INVALID_RATING = "Invalid rating, must be 1–5."


class ValidationError(Exception):
    """Input rejected before any request is made."""


def require_credentials(username, password):
    """Trims both fields; either one empty is a validation error."""
    username = (username or "").strip()
    password = (password or "").strip()
    if not username or not password:
        raise ValidationError("Username and password are required.")
    return username, password


def blank_to_none(text):
    text = (text or "").strip()
    return text or None


def parse_review_input(raw_rating, raw_review, default_rating=None, invalid_message=INVALID_RATING):
    """
    Resolves the review dialog's raw fields.
    A blank rating keeps the default; an unusable one keeps it too and carries a warning.
    """
    rating = default_rating
    warning = None

    raw_rating = "" if raw_rating is None else str(raw_rating).strip()
    if raw_rating:
        parsed = valid_rating(raw_rating)
        if parsed is None:
            warning = invalid_message
        else:
            rating = parsed

    return ReviewInput(rating=rating, review=blank_to_none(raw_review), warning=warning)


def build_create_payload(form: NewMovieForm):
    title = (form.title or "").strip()
    if not title:
        raise ValidationError("Please enter a title")

    payload = {
        "title": title,
        "status": form.status,
        "imageUrl": blank_to_none(form.poster_url),
    }

    if form.status == HAVE_WATCHED:
        rating = valid_rating(form.rating)
        if rating is None:
            raise ValidationError("Please select a rating 1–5 for watched movies.")
        payload["rating"] = rating
        payload["review"] = blank_to_none(form.review)

    return payload
