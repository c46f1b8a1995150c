# Service classes holding the business rules and SQL for each resource.
