def to_dict(obj) -> dict:
    """Column values of an ORM row (loads expired attributes after a commit)."""
    return {column.name: getattr(obj, column.name) for column in obj.__table__.columns}
