"""Core numerical layer: domain models, profiles, baselines, detection and fitting."""
