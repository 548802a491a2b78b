"""Adapter from configuration models to domain settings."""

from wallcraft.application.config.schema import PlacementConfiguration
from wallcraft.domain.value_objects import PlacementSettings


def config_to_settings(config: PlacementConfiguration) -> PlacementSettings:
    """Convert a validated configuration into PlacementSettings.

    Args:
        config: Validated root configuration.

    Returns:
        Immutable settings for the placement services.
    """
    search = config.search
    return PlacementSettings(
        max_block_width=config.bounds.max_block_width,
        max_block_height=config.bounds.max_block_height,
        grid_size=config.snapping.grid_size,
        snap_distance=config.snapping.snap_distance,
        fine_scan_step=search.fine_scan_step,
        coarse_scan_step=search.coarse_scan_step,
        dense_scan_threshold=search.dense_scan_threshold,
        scan_candidate_limit=search.scan_candidate_limit,
        edge_score=search.edge_score,
        adjacency_score=search.adjacency_score,
        adjacency_bonus=search.adjacency_bonus,
        overflow_scan_step=search.overflow_scan_step,
        random_attempts=search.random_attempts,
        sparse_layout_limit=search.sparse_layout_limit,
        shuffled_grid_attempts=search.shuffled_grid_attempts,
        nearby_radius=search.nearby_radius,
        nearby_step=search.nearby_step,
        small_overlap_threshold=config.overlap.small_threshold,
        significant_overlap_threshold=config.overlap.significant_threshold,
        layout_attempts_multiplier=config.layout.attempts_multiplier,
        palette=tuple(config.layout.palette),
    )
