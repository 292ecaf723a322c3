"""Fixed analysis prompt and the startup demo analysis."""

from __future__ import annotations

LEAF_PROMPT = (
    "Analyze this leaf image for educational purposes and provide the following information:\n"
    "1. Species identification (scientific name, common name, family, classification)\n"
    "2. Leaf characteristics (shape, margin, size, color, texture, venation)\n"
    "3. Tree information (size, growth rate, lifespan, bark, native range)\n"
    "4. Ecological significance (wildlife value, seasonal changes, habitat, ecosystem role)\n"
    "5. Additional information (uses, cultural significance, interesting facts, identification tips)\n"
    "\n"
    "IMPORTANT: This is for educational purposes only."
)

# Shown with the bundled default image before the user uploads anything.
DEFAULT_ANALYSIS = """1. Species Identification:
- Scientific name: Acer rubrum
- Common name: Red Maple
- Family: Sapindaceae
- Classification: Deciduous broadleaf

2. Leaf Characteristics:
- Shape: Palmate with 3-5 lobes
- Margin: Serrated edges
- Size: Medium (3-5 inches wide)
- Color: Green in summer, vibrant red in fall
- Texture: Smooth on top, slightly fuzzy underneath
- Venation: Palmate venation pattern

3. Tree Information:
- Size: Medium to large (40-60 feet tall)
- Growth Rate: Moderate to fast
- Lifespan: 80-100 years
- Bark: Smooth and light gray when young, developing ridges with age
- Native Range: Eastern and Central North America

4. Ecological Significance:
- Wildlife Value: Seeds provide food for birds and small mammals
- Seasonal Changes: Spectacular red fall color
- Habitat: Adaptable to various environments, common in wetlands
- Ecosystem Role: Provides shade, habitat, and food for wildlife
- Pollination: Wind-pollinated

5. Additional Information:
- Uses: Ornamental landscaping, shade tree, maple syrup production
- Cultural Significance: State tree of Rhode Island
- Interesting Facts: One of the first trees to change color in fall
- Identification Tips: Look for opposite leaf arrangement and V-shaped seed pairs
- Similar Species: Sugar maple, silver maple (distinguished by leaf shape)"""


def get_all_templates() -> dict[str, str]:
    return {"leaf": LEAF_PROMPT}
