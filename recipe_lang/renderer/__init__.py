"""
Recipes may be rendered as plain text for display in a terminal:

.. autofunction:: recipe_lang.renderer.text.render_recipe
"""
