"""MindFlow view models: color, shape and pan gesture state for the editor."""
