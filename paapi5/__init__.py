"""Request parameters, resource validation and response models for the Amazon Product Advertising API 5.0."""

__version__ = "0.1.0"