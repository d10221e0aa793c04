"""Tilepath Planner - Transport eligibility and path export for tile-based worlds.

Route-planning support around an external shortest-path search:
- Decides which optional transports (shortcuts, boats, fairy rings, teleports)
  the player may use, given skills, quests and preferences
- Guards against routing into the wilderness unless the target requires it
- Converts a raw tile path into compact, map-aware polylines and exports them
  as wiki line markup or GeoJSON

Modules:
    core: Geometry (restricted-zone regions, map region classification)
    model: Data structures (TileCoordinate, TransportEdge, PathSegment, StyleConfig)
    eligibility: Transport eligibility rule engine and host interfaces
    export: Path segmentation, encoders and export service
    settings: User settings and settings stores

Example:
    from tilepath_planner.export import segment_path, to_wiki_markup
    from tilepath_planner.model import TileCoordinate
"""
