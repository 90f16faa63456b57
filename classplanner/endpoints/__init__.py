"""Request handlers for each resource of the scheduling API."""