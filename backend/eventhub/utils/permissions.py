"""Permission helpers."""

def is_organizer(user_id, event):
    return event.get("organizerId") == user_id


def is_owner(user_id, session):
    return session.get("userId") == user_id
