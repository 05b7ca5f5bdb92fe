"""Hosting surfaces and the composition root that wires the layers together."""
