"""Domain layer: value objects, their errors, and the contracts they satisfy."""
