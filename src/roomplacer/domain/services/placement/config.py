"""Placement engine configuration.

This module provides PlacementConfig for tuning the search heuristics and
collision buffers of the placement engine.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlacementConfig:
    """Tunable parameters for collision checks and position search.

    Attributes:
        shadow_factor: Fraction of an upright item's size its shadow covers.
        rug_min_depth: Pre-scale depth used for rugs whose depth is zero.
        upright_default_depth: Pre-scale depth used for uprights with zero depth.
        wall_x_buffer: Horizontal clearance between wall items.
        wall_y_buffer: Vertical clearance between wall items.
        gap_buffer: Clearance on each side of a gap found on the wall.
        wall_tolerance: Absolute tolerance for wall-mount position checks and
            partition clearances.
        max_attempts: Default attempt budget for a single-item search.
        variable_height_attempts: Attempt budget for variable-height items.
        gap_attempts: Attempts that may use gap finding.
        gap_probability: Chance that such an attempt uses gap finding.
        random_wall_attempts: Attempts (counted from zero) that try random X.
        min_grid_cell: Smallest grid cell for the wall grid fallback.
        grid_cell_padding: Padding added to the item width for grid cells.
        grid_jitter: Fraction of a grid cell used as random jitter.
        y_candidate_limit: Maximum number of Y candidates.
        y_candidate_spacing: Minimum spacing of sweep and random Y candidates.
        partition_padding: Padding added to fixed-item partitions.
        partition_jitter: Total random spread of fixed-item partition widths.
        oversized_spacing: Spacing added to degraded-mode partitions.
        max_partition_offset: Maximum jitter of a fixed item inside its partition.
        max_overlay_offset: Maximum jitter of a painting inside a partition.
        ceiling_y: Top edge a painting overlay must stay under.
        overlay_clearance: Gap between a fixed item's top and a painting overlay.
        painting_min_separation: Y separation between paintings sharing X.
        painting_x_proximity: X distance within which paintings share a column.
        free_partition_proximity: X distance that disqualifies a free partition.
        floor_grid_steps: Lattice steps per axis for floor grid placement.
        floor_attempts: Total attempt budget of the floor search.
        density_threshold: Distance below which a floor sample is retried.
        density_retries: Retries spent looking for a sparser floor sample.
        parking_spacing: Spacing of parked floor items.
        parking_wall_distance: Minimum distance of parked wall items from the wall.
        parking_row_height: Vertical spacing of parked wall items.
    """

    shadow_factor: float = 0.7
    rug_min_depth: float = 20.0
    upright_default_depth: float = 80.0
    wall_x_buffer: float = 50.0
    wall_y_buffer: float = 20.0
    gap_buffer: float = 15.0
    wall_tolerance: float = 1e-6
    max_attempts: int = 100
    variable_height_attempts: int = 200
    gap_attempts: int = 20
    gap_probability: float = 0.6
    random_wall_attempts: int = 30
    min_grid_cell: float = 120.0
    grid_cell_padding: float = 30.0
    grid_jitter: float = 0.8
    y_candidate_limit: int = 8
    y_candidate_spacing: float = 30.0
    partition_padding: float = 10.0
    partition_jitter: float = 40.0
    oversized_spacing: float = 20.0
    max_partition_offset: float = 50.0
    max_overlay_offset: float = 30.0
    ceiling_y: float = 650.0
    overlay_clearance: float = 20.0
    painting_min_separation: float = 500.0
    painting_x_proximity: float = 150.0
    free_partition_proximity: float = 100.0
    floor_grid_steps: int = 8
    floor_attempts: int = 50
    density_threshold: float = 100.0
    density_retries: int = 5
    parking_spacing: float = 100.0
    parking_wall_distance: float = 300.0
    parking_row_height: float = 150.0

    def __post_init__(self) -> None:
        if not 0 < self.shadow_factor <= 1:
            raise ValueError("shadow_factor must be between 0 and 1")
        if self.wall_x_buffer < 0 or self.wall_y_buffer < 0 or self.gap_buffer < 0:
            raise ValueError("Buffers must be non-negative")
        if self.wall_tolerance < 0:
            raise ValueError("wall_tolerance must be non-negative")
        if self.max_attempts < 1 or self.variable_height_attempts < 1:
            raise ValueError("Attempt budgets must be at least 1")
        if not 0 <= self.gap_probability <= 1:
            raise ValueError("gap_probability must be between 0 and 1")
        if self.y_candidate_limit < 1:
            raise ValueError("y_candidate_limit must be at least 1")
        if self.floor_grid_steps < 1:
            raise ValueError("floor_grid_steps must be at least 1")
        if self.floor_attempts < 2:
            raise ValueError("floor_attempts must be at least 2")
