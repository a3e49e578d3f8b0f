# lifepulse/services/remedies.py

from typing import Dict, List, Tuple

Remedy = Dict[str, object]


def _remedy(title: str, ingredients: List[str], instructions: str, effectiveness: int) -> Remedy:
    return {
        "title": title,
        "ingredients": ingredients,
        "instructions": instructions,
        "effectiveness": effectiveness,
    }


REMEDY_LIBRARY: Dict[str, List[Remedy]] = {
    "headache": [
        _remedy(
            "Peppermint Oil Compress",
            ["Peppermint essential oil", "Cold water", "Clean cloth or towel"],
            "Add a few drops of peppermint oil to cold water. Soak the cloth in the mixture, wring it out, "
            "and apply to your forehead or temples for 15-20 minutes.",
            4,
        ),
        _remedy(
            "Hydration Therapy",
            ["Water", "Electrolyte drink (optional)"],
            "Drink 16-32 ounces of water, as dehydration is a common cause of headaches. Rest in a quiet, "
            "dark room after hydrating.",
            4,
        ),
        _remedy(
            "Ginger Tea",
            ["Fresh ginger root (1-inch piece)", "Water (2 cups)", "Honey (optional)", "Lemon (optional)"],
            "Slice the ginger and simmer in water for 10 minutes. Strain, add honey or lemon if desired, "
            "and drink while warm.",
            3,
        ),
    ],
    "cold": [
        _remedy(
            "Honey Lemon Tea",
            ["Honey (1-2 tablespoons)", "Fresh lemon juice (from half a lemon)", "Hot water (1 cup)", "Ginger (optional)"],
            "Mix honey and lemon juice into hot water. Sip slowly while warm. Add grated ginger for extra benefits.",
            4,
        ),
        _remedy(
            "Steam Inhalation",
            ["Hot water", "Bowl", "Towel", "Eucalyptus or peppermint oil (optional)"],
            "Pour hot water into a bowl. Add a few drops of essential oil if using. Place face over bowl "
            "(not too close) and cover head with towel. Breathe deeply for 5-10 minutes.",
            4,
        ),
        _remedy(
            "Saltwater Gargle",
            ["Warm water (1 cup)", "Salt (1/2 teaspoon)"],
            "Dissolve salt in warm water. Gargle for 30 seconds, then spit out. Repeat several times a day "
            "to soothe a sore throat.",
            3,
        ),
    ],
    "cough": [
        _remedy(
            "Honey and Ginger Syrup",
            ["Honey (1/2 cup)", "Fresh ginger (2 tablespoons, grated)", "Lemon juice (1 tablespoon)", "Water (1/4 cup)"],
            "Simmer grated ginger in water for 10 minutes. Strain, then mix in honey and lemon juice. "
            "Take 1-2 teaspoons as needed for cough relief.",
            4,
        ),
        _remedy(
            "Thyme Tea",
            ["Dried thyme (1-2 teaspoons)", "Hot water (1 cup)", "Honey (optional)"],
            "Steep thyme in hot water for 10 minutes. Strain and add honey if desired. Drink up to 3 times daily.",
            3,
        ),
        _remedy(
            "Steamy Shower",
            ["Hot shower", "Eucalyptus oil (optional)"],
            "Run a hot shower and sit in the bathroom breathing in the steam for 15 minutes. Add a few drops "
            "of eucalyptus oil to the shower floor for enhanced effects.",
            4,
        ),
    ],
    "fever": [
        _remedy(
            "Lukewarm Compress",
            ["Lukewarm water", "Clean cloths or small towels"],
            "Soak cloths in lukewarm water, wring out excess, and place on forehead, neck, and wrists. "
            "Replace as they warm up from body heat.",
            4,
        ),
        _remedy(
            "Apple Cider Vinegar Socks",
            ["Apple cider vinegar (1 part)", "Water (2 parts)", "Pair of cotton socks"],
            "Mix apple cider vinegar with water. Soak socks in mixture, wring out excess, and wear. "
            "Cover with dry socks if desired.",
            3,
        ),
        _remedy(
            "Basil Leaf Tea",
            ["Fresh basil leaves (about 20)", "Water (2 cups)"],
            "Boil water with basil leaves until the water reduces to half. Strain and sip slowly while warm.",
            3,
        ),
    ],
    "sore_throat": [
        _remedy(
            "Honey and Turmeric Mix",
            ["Honey (1 tablespoon)", "Turmeric powder (1/4 teaspoon)", "Warm water (optional)"],
            "Mix honey and turmeric thoroughly. Take 1/2 teaspoon of this mixture every few hours, letting "
            "it slowly dissolve in your mouth.",
            5,
        ),
        _remedy(
            "Sage Gargle",
            ["Dried sage leaves (2 teaspoons)", "Water (1 cup)", "Apple cider vinegar (1 teaspoon, optional)", "Salt (1/4 teaspoon, optional)"],
            "Boil sage in water for 10 minutes. Strain, add vinegar and salt if using, and let cool to warm "
            "temperature. Gargle for 30 seconds several times daily.",
            4,
        ),
        _remedy(
            "Cinnamon Tea",
            ["Cinnamon stick or powder (1 teaspoon)", "Water (1 cup)", "Honey (to taste)"],
            "Steep cinnamon in boiling water for 10 minutes. Add honey and sip while warm.",
            3,
        ),
    ],
    "stomachache": [
        _remedy(
            "Ginger and Mint Tea",
            ["Fresh ginger (1-inch piece, sliced)", "Fresh mint leaves (5-6 leaves)", "Water (2 cups)", "Honey (optional)"],
            "Simmer ginger in water for 5 minutes. Add mint leaves and remove from heat. Steep for another "
            "5 minutes, strain, and add honey if desired.",
            4,
        ),
        _remedy(
            "Apple Cider Vinegar Drink",
            ["Apple cider vinegar (1 tablespoon)", "Water (1 cup)", "Honey (1 teaspoon, optional)"],
            "Mix all ingredients and sip slowly. Best taken before meals for digestive issues.",
            3,
        ),
        _remedy(
            "Fennel Seed Tea",
            ["Fennel seeds (1 teaspoon)", "Hot water (1 cup)"],
            "Crush fennel seeds slightly and steep in hot water for 10 minutes. Strain and drink after meals "
            "to relieve bloating and gas.",
            4,
        ),
    ],
    "insomnia": [
        _remedy(
            "Lavender and Chamomile Tea",
            ["Dried chamomile flowers (1 tablespoon)", "Dried lavender buds (1 teaspoon)", "Hot water (1 cup)", "Honey (optional)"],
            "Steep herbs in hot water for 10 minutes. Strain, add honey if desired, and drink 30-60 minutes "
            "before bedtime.",
            4,
        ),
        _remedy(
            "Warm Milk with Nutmeg",
            ["Milk (1 cup)", "Ground nutmeg (1/8 teaspoon)", "Honey (optional)"],
            "Warm milk (don't boil). Stir in nutmeg and honey if using. Drink 30 minutes before bedtime.",
            4,
        ),
        _remedy(
            "Banana Cinnamon Smoothie",
            ["Ripe banana (1)", "Warm milk or almond milk (1 cup)", "Cinnamon (1/4 teaspoon)", "Honey (optional)"],
            "Blend all ingredients until smooth. Drink 1 hour before bedtime for better sleep.",
            3,
        ),
    ],
    "stress": [
        _remedy(
            "Lemon Balm Tea",
            ["Dried lemon balm leaves (1 tablespoon)", "Hot water (1 cup)", "Honey (optional)"],
            "Steep lemon balm in hot water for 10 minutes. Strain, add honey if desired, and sip slowly.",
            4,
        ),
        _remedy(
            "Lavender Bath",
            ["Lavender essential oil (5-10 drops)", "Epsom salts (1 cup, optional)", "Warm bath water"],
            "Add lavender oil (and Epsom salts if using) to warm bath water. Soak for 20-30 minutes before bedtime.",
            5,
        ),
        _remedy(
            "Calming Oat Drink",
            ["Oats (1/3 cup)", "Water (2 cups)", "Cinnamon stick (1)", "Honey (to taste)"],
            "Simmer oats and cinnamon in water for 10-15 minutes. Strain, add honey, and drink warm.",
            3,
        ),
    ],
    "joint_pain": [
        _remedy(
            "Turmeric Golden Milk",
            ["Turmeric powder (1 teaspoon)", "Black pepper (pinch)", "Coconut oil or ghee (1 teaspoon)", "Milk or plant-based milk (1 cup)", "Honey (to taste, optional)"],
            "Heat milk with turmeric, black pepper, and oil until warm. Stir well and drink once or twice daily.",
            4,
        ),
        _remedy(
            "Ginger Compress",
            ["Fresh ginger (2-inch piece)", "Water (2 cups)", "Clean cloth"],
            "Simmer grated ginger in water for 10 minutes. Soak cloth in the mixture (when cool enough to "
            "touch), wring out excess, and apply to painful joints for 15 minutes.",
            4,
        ),
        _remedy(
            "Epsom Salt Soak",
            ["Epsom salt (2 cups)", "Warm water (enough for affected joint)", "Essential oils (optional)"],
            "Dissolve Epsom salt in warm water. Soak affected joint for 15-20 minutes. Pat dry and apply "
            "moisturizer after soaking.",
            4,
        ),
    ],
}

# Checked in order; the first entry with a keyword found in the ailment wins.
AILMENT_KEYWORDS: List[Tuple[Tuple[str, ...], str]] = [
    (("head", "migrain"), "headache"),
    (("cold", "flu", "congestion"), "cold"),
    (("cough",), "cough"),
    (("fever", "temperature"), "fever"),
    (("throat", "swallow"), "sore_throat"),
    (("stomach", "digest", "nausea", "vomit"), "stomachache"),
    (("sleep", "insomnia"), "insomnia"),
    (("stress", "anxi", "worry", "tension"), "stress"),
    (("joint", "arthritis", "pain"), "joint_pain"),
]


def match_ailment(ailment: str):
    """Returns the library key for an ailment description, or None."""
    text = ailment.lower()
    for keywords, key in AILMENT_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return key
    return None


def generic_remedies(ailment: str) -> List[Remedy]:
    return [
        _remedy(
            f"{ailment} Relief - Rest and Hydration",
            ["Water", "Comfortable resting space", "Fresh fruits (optional)"],
            "Rest is essential for recovery. Ensure you're well-hydrated by drinking plenty of water throughout "
            "the day. Fresh fruits can provide additional nutrients to support healing.",
            3,
        ),
        _remedy(
            f"{ailment} Support - Warm Compress",
            ["Clean cloth or towel", "Warm water"],
            "Soak the cloth in warm water, wring out excess, and apply to the affected area for 15-20 minutes. "
            "Repeat several times a day as needed for comfort.",
            3,
        ),
        _remedy(
            f"General Wellness for {ailment}",
            ["Herbal tea of choice", "Honey", "Lemon (optional)"],
            "Many herbal teas have calming and healing properties. Choose one appropriate for your condition, "
            "add honey for soothing effects, and drink throughout the day.",
            3,
        ),
    ]


def suggest_home_remedies(ailment: str) -> List[Remedy]:
    """Looks up remedies for an ailment, falling back to general comfort measures."""
    key = match_ailment(ailment)
    if key is None:
        return generic_remedies(ailment.strip())
    return REMEDY_LIBRARY[key]
