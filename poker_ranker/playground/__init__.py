"""HTTP playground for dealing and classifying hands."""
