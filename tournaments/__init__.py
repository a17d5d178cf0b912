"""
Chess tournament map package.

This package holds everything the map page needs that is not drawing: loading
the tournament list, deriving the selectable years, geocoding a searched place,
the radius test, and the render pipeline that turns the current filter into
markers and list entries.

Modules:
    constants: Radius, default map view, geocoder settings
    errors   : Exception hierarchy (load and geocode failures)
    models   : Tournament records, filter state and render output types
    store    : One-shot JSON loader for the tournament list
    years    : Distinct year index and default-year resolution
    geocoder : Nominatim lookup for a free-text place name
    proximity: Great-circle distance and radius inclusion test
    render   : Pure render pipeline (records + filter -> output)
    session  : Application state object driving the filter state machine
"""
