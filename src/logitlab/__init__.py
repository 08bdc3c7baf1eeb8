"""The Logit Lab: an interactive playground for 2-feature logistic regression."""

__version__ = "0.1.0"
