# Request and response models for the API.
