# Route modules, one per resource plus operational endpoints.
