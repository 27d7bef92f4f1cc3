def value_error_details(exc: ValueError) -> list[dict[str, object]]:
    """@brief Build a Pydantic-style 422 detail payload from a ValueError.

    @param exc Domain ValueError raised while evaluating a query.
    @return List-formatted validation details compatible with FastAPI/Pydantic errors.
    """
    return [
        {
            "type": type(exc).__name__,
            "loc": ["body"],
            "msg": str(exc),
            "input": None,
        }
    ]
