"""Qt collaborators around the gesture engine: input, rendering and loading."""
