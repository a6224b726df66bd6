"""LearnSmart e-learning back end."""
