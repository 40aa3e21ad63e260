"""Enumerations, request parameters, resource validation and response models for the Product Advertising API."""