"""
UI components for the Foodie Find Streamlit app.

This package contains:
- styles / layout / feedback: global CSS, layout primitives, error/empty/loading states
- modal: dialog vs. inline presentation of overlays
- search_bar, filter_bar, recipe_list, recipe_detail, favorites_list, api_key_input:
  the app's screen components
"""
