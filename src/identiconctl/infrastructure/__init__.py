"""Infrastructure layer: image codec and filesystem access."""
