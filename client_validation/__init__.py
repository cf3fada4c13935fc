"""
Client Validation

Publishes the validation rules of Django forms marked as view models to
jQuery Validation Unobtrusive, as JSON or as a JavaScript snippet.

- view_models: marker mixin and discovery
- rules: rule extraction and aggregation
- attributes: data-val-* attributes for server-rendered forms
- views: cached JSON and script endpoints
"""
