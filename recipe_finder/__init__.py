"""
Foodie Find core package.

Contains everything the Streamlit frontend needs that is not rendering:
- config: environment / .env loading and logging setup
- models: recipe, ingredient and filter data types
- errors: failure types raised inside the API client
- sanitize: HTML-to-text cleanup of API rich text
- observable: change-notification mixin
- storage: durable key/value persistence
- credentials / favorites: the two persisted stores
- client: Spoonacular API client
- filters: draft/applied filter editor
- coordinator: the application state holder
"""
