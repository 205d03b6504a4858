"""Store router dependencies.

Services override these placeholders (app.dependency_overrides) with their
configured implementations, e.g. one built by build_store_service().
"""


def get_store_service():
    """Placeholder for store service dependency.
    
    Services should override this to provide configured service.
    """
    raise NotImplementedError(
        "Services must provide their own store service dependency"
    )
