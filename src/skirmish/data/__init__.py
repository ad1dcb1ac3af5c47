"""Definition data loading."""
