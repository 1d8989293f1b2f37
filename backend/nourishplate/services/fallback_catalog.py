"""Canned meals used when the model cannot produce a plan."""
from __future__ import annotations

from typing import Any, Dict, List

FALLBACK_MEALS: Dict[str, List[Dict[str, Any]]] = {
    "breakfast": [
        {
            "name": "Banana Pancake Bites",
            "description": "Mini pancakes made with banana and whole wheat flour, perfect for little hands",
            "calories": 280,
            "prep_time": "15 min",
            "difficulty": "easy",
            "ingredients": ["Banana", "Whole wheat flour", "Egg", "Milk", "Honey"],
            "instructions": ["Mash banana", "Mix with flour and egg", "Cook small pancakes", "Serve with honey"],
            "nutrition": {"protein": 12, "carbs": 35, "fat": 8, "fiber": 4, "calcium": 150, "iron": 2},
            "allergens": ["eggs", "milk", "gluten"],
            "kid_friendly_score": 9,
            "portability_score": 8,
            "prep_tips": ["Make ahead and freeze", "Use fun shapes"],
            "storage_tips": ["Store in airtight container", "Reheat in toaster"],
            "emoji": "🥞",
        },
        {
            "name": "Overnight Oats with Berries",
            "description": "Creamy oats with fresh berries, prepared the night before",
            "calories": 260,
            "prep_time": "5 min",
            "difficulty": "easy",
            "ingredients": ["Rolled oats", "Milk", "Greek yogurt", "Berries", "Honey"],
            "instructions": ["Mix oats with milk and yogurt", "Add berries and honey", "Refrigerate overnight", "Serve cold"],
            "nutrition": {"protein": 14, "carbs": 32, "fat": 6, "fiber": 5, "calcium": 180, "iron": 2},
            "allergens": ["milk"],
            "kid_friendly_score": 8,
            "portability_score": 9,
            "prep_tips": ["Use mason jars for easy transport", "Add toppings in the morning"],
            "storage_tips": ["Keep refrigerated", "Consume within 2 days"],
            "emoji": "🥣",
        },
        {
            "name": "Scrambled Egg Muffins",
            "description": "Fluffy scrambled eggs baked in muffin cups with cheese and vegetables",
            "calories": 290,
            "prep_time": "20 min",
            "difficulty": "medium",
            "ingredients": ["Eggs", "Cheese", "Bell peppers", "Spinach", "Milk"],
            "instructions": ["Beat eggs with milk", "Add vegetables and cheese", "Pour into muffin cups", "Bake until set"],
            "nutrition": {"protein": 16, "carbs": 8, "fat": 18, "fiber": 2, "calcium": 200, "iron": 3},
            "allergens": ["eggs", "milk"],
            "kid_friendly_score": 9,
            "portability_score": 10,
            "prep_tips": ["Make batch on Sunday", "Freeze for quick breakfasts"],
            "storage_tips": ["Refrigerate up to 5 days", "Microwave to reheat"],
            "emoji": "🧁",
        },
        {
            "name": "Peanut Butter Toast Shapes",
            "description": "Whole grain toast cut into fun shapes with peanut butter and banana",
            "calories": 270,
            "prep_time": "8 min",
            "difficulty": "easy",
            "ingredients": ["Whole grain bread", "Peanut butter", "Banana", "Cinnamon"],
            "instructions": ["Toast bread", "Spread peanut butter", "Add banana slices", "Cut into fun shapes"],
            "nutrition": {"protein": 11, "carbs": 28, "fat": 14, "fiber": 4, "calcium": 80, "iron": 2},
            "allergens": ["peanuts", "gluten"],
            "kid_friendly_score": 10,
            "portability_score": 7,
            "prep_tips": ["Use cookie cutters for shapes", "Pack banana separately"],
            "storage_tips": ["Eat fresh", "Wrap in parchment paper"],
            "emoji": "🍞",
        },
        {
            "name": "Smoothie Bowl",
            "description": "Thick fruit smoothie topped with granola and fresh fruit",
            "calories": 300,
            "prep_time": "10 min",
            "difficulty": "easy",
            "ingredients": ["Frozen berries", "Banana", "Greek yogurt", "Granola", "Honey"],
            "instructions": ["Blend frozen fruit with yogurt", "Pour into bowl", "Top with granola and fresh fruit", "Drizzle with honey"],
            "nutrition": {"protein": 15, "carbs": 45, "fat": 8, "fiber": 6, "calcium": 150, "iron": 2},
            "allergens": ["milk"],
            "kid_friendly_score": 9,
            "portability_score": 6,
            "prep_tips": ["Use frozen fruit for thickness", "Let kids choose toppings"],
            "storage_tips": ["Eat immediately", "Pack toppings separately"],
            "emoji": "🍓",
        },
        {
            "name": "Mini Breakfast Quesadillas",
            "description": "Small tortillas filled with scrambled eggs and cheese",
            "calories": 285,
            "prep_time": "12 min",
            "difficulty": "medium",
            "ingredients": ["Small tortillas", "Eggs", "Cheese", "Ham", "Salsa"],
            "instructions": ["Scramble eggs", "Fill tortillas with eggs and cheese", "Cook until crispy", "Serve with salsa"],
            "nutrition": {"protein": 18, "carbs": 22, "fat": 15, "fiber": 2, "calcium": 220, "iron": 2},
            "allergens": ["eggs", "milk", "gluten"],
            "kid_friendly_score": 9,
            "portability_score": 8,
            "prep_tips": ["Make ahead and freeze", "Cut into triangles"],
            "storage_tips": ["Wrap individually", "Reheat in toaster oven"],
            "emoji": "🌮",
        },
        {
            "name": "Yogurt Parfait Cups",
            "description": "Layered Greek yogurt with granola and fresh fruit",
            "calories": 250,
            "prep_time": "5 min",
            "difficulty": "easy",
            "ingredients": ["Greek yogurt", "Granola", "Strawberries", "Blueberries", "Honey"],
            "instructions": ["Layer yogurt in cup", "Add granola and fruit", "Repeat layers", "Top with honey"],
            "nutrition": {"protein": 16, "carbs": 30, "fat": 6, "fiber": 4, "calcium": 200, "iron": 1},
            "allergens": ["milk"],
            "kid_friendly_score": 8,
            "portability_score": 9,
            "prep_tips": ["Use clear cups to show layers", "Pack granola separately"],
            "storage_tips": ["Keep cold", "Assemble just before eating"],
            "emoji": "🥛",
        },
    ],
    "lunch": [
        {
            "name": "Rainbow Veggie Wrap",
            "description": "Colorful wrap with hummus, vegetables, and cheese in a fun tortilla",
            "calories": 350,
            "prep_time": "10 min",
            "difficulty": "easy",
            "ingredients": ["Whole wheat tortilla", "Hummus", "Carrots", "Cucumber", "Cheese", "Lettuce"],
            "instructions": ["Spread hummus on tortilla", "Add vegetables", "Roll tightly", "Cut in half"],
            "nutrition": {"protein": 15, "carbs": 40, "fat": 12, "fiber": 6, "calcium": 200, "iron": 3},
            "allergens": ["gluten", "sesame"],
            "kid_friendly_score": 8,
            "portability_score": 9,
            "prep_tips": ["Use colorful vegetables", "Cut into pinwheels"],
            "storage_tips": ["Wrap in foil", "Keep cool until lunch"],
            "emoji": "🌯",
        },
        {
            "name": "Turkey and Cheese Roll-ups",
            "description": "Sliced turkey and cheese rolled up with vegetables in a tortilla",
            "calories": 320,
            "prep_time": "8 min",
            "difficulty": "easy",
            "ingredients": ["Turkey slices", "Cheese", "Tortilla", "Lettuce", "Tomato"],
            "instructions": ["Layer turkey and cheese on tortilla", "Add vegetables", "Roll tightly", "Secure with toothpick"],
            "nutrition": {"protein": 22, "carbs": 25, "fat": 14, "fiber": 3, "calcium": 180, "iron": 2},
            "allergens": ["gluten", "milk"],
            "kid_friendly_score": 9,
            "portability_score": 10,
            "prep_tips": ["Use fun colored tortillas", "Cut into spirals"],
            "storage_tips": ["Wrap in plastic wrap", "Keep refrigerated"],
            "emoji": "🥪",
        },
        {
            "name": "Pasta Salad with Chicken",
            "description": "Cold pasta salad with grilled chicken, vegetables, and Italian dressing",
            "calories": 380,
            "prep_time": "15 min",
            "difficulty": "medium",
            "ingredients": ["Pasta", "Grilled chicken", "Cherry tomatoes", "Cucumber", "Italian dressing"],
            "instructions": ["Cook pasta and cool", "Add chicken and vegetables", "Toss with dressing", "Chill before serving"],
            "nutrition": {"protein": 25, "carbs": 35, "fat": 15, "fiber": 4, "calcium": 80, "iron": 3},
            "allergens": ["gluten"],
            "kid_friendly_score": 8,
            "portability_score": 9,
            "prep_tips": ["Use fun pasta shapes", "Make ahead for better flavor"],
            "storage_tips": ["Keep cold", "Pack dressing separately"],
            "emoji": "🍝",
        },
        {
            "name": "Mini Bagel Pizzas",
            "description": "Toasted mini bagels topped with pizza sauce, cheese, and vegetables",
            "calories": 340,
            "prep_time": "12 min",
            "difficulty": "easy",
            "ingredients": ["Mini bagels", "Pizza sauce", "Mozzarella cheese", "Pepperoni", "Bell peppers"],
            "instructions": ["Split and toast bagels", "Spread sauce", "Add cheese and toppings", "Bake until melted"],
            "nutrition": {"protein": 18, "carbs": 32, "fat": 16, "fiber": 3, "calcium": 250, "iron": 2},
            "allergens": ["gluten", "milk"],
            "kid_friendly_score": 10,
            "portability_score": 7,
            "prep_tips": ["Let kids choose toppings", "Make ahead and reheat"],
            "storage_tips": ["Wrap in foil", "Eat warm or cold"],
            "emoji": "🍕",
        },
        {
            "name": "Chicken Salad Sandwich",
            "description": "Creamy chicken salad with grapes and celery on whole grain bread",
            "calories": 360,
            "prep_time": "10 min",
            "difficulty": "easy",
            "ingredients": ["Cooked chicken", "Grapes", "Celery", "Mayo", "Whole grain bread"],
            "instructions": ["Mix chicken with grapes and celery", "Add mayo", "Spread on bread", "Cut into triangles"],
            "nutrition": {"protein": 24, "carbs": 28, "fat": 16, "fiber": 4, "calcium": 100, "iron": 2},
            "allergens": ["gluten", "eggs"],
            "kid_friendly_score": 8,
            "portability_score": 8,
            "prep_tips": ["Use rotisserie chicken", "Add grapes for sweetness"],
            "storage_tips": ["Keep cold", "Pack with ice pack"],
            "emoji": "🥙",
        },
        {
            "name": "Bento Box Lunch",
            "description": "Japanese-style lunch box with rice, protein, and vegetables",
            "calories": 370,
            "prep_time": "15 min",
            "difficulty": "medium",
            "ingredients": ["Rice", "Teriyaki chicken", "Edamame", "Carrots", "Seaweed snacks"],
            "instructions": ["Pack rice in compartment", "Add chicken and vegetables", "Include seaweed snacks", "Arrange colorfully"],
            "nutrition": {"protein": 20, "carbs": 45, "fat": 10, "fiber": 5, "calcium": 120, "iron": 3},
            "allergens": ["soy"],
            "kid_friendly_score": 7,
            "portability_score": 10,
            "prep_tips": ["Use bento box containers", "Make it colorful"],
            "storage_tips": ["Keep components separate", "Include ice pack"],
            "emoji": "🍱",
        },
        {
            "name": "Grilled Cheese and Soup",
            "description": "Classic grilled cheese sandwich with tomato soup in a thermos",
            "calories": 390,
            "prep_time": "10 min",
            "difficulty": "easy",
            "ingredients": ["Bread", "Cheese", "Butter", "Tomato soup"],
            "instructions": ["Butter bread", "Add cheese", "Grill until golden", "Pack soup in thermos"],
            "nutrition": {"protein": 16, "carbs": 38, "fat": 20, "fiber": 3, "calcium": 300, "iron": 2},
            "allergens": ["gluten", "milk"],
            "kid_friendly_score": 10,
            "portability_score": 8,
            "prep_tips": ["Use different cheese types", "Cut into fun shapes"],
            "storage_tips": ["Wrap sandwich in foil", "Keep soup hot in thermos"],
            "emoji": "🧀",
        },
    ],
    "dinner": [
        {
            "name": "Baked Salmon with Sweet Potato",
            "description": "Oven-baked salmon fillet with roasted sweet potato wedges and green beans",
            "calories": 520,
            "prep_time": "30 min",
            "difficulty": "medium",
            "ingredients": ["Salmon fillet", "Sweet potato", "Green beans", "Olive oil", "Lemon"],
            "instructions": ["Cut sweet potato into wedges", "Roast for 15 minutes", "Add salmon and beans to the tray", "Bake 12 more minutes and finish with lemon"],
            "nutrition": {"protein": 34, "carbs": 42, "fat": 20, "fiber": 7, "calcium": 90, "iron": 2},
            "allergens": ["fish"],
            "kid_friendly_score": 7,
            "portability_score": 4,
            "prep_tips": ["Line the tray with parchment", "Cut wedges evenly"],
            "storage_tips": ["Refrigerate up to 2 days", "Reheat gently"],
            "emoji": "🐟",
        },
        {
            "name": "Chicken Vegetable Stir-Fry",
            "description": "Quick stir-fried chicken with broccoli, peppers, and brown rice",
            "calories": 540,
            "prep_time": "25 min",
            "difficulty": "medium",
            "ingredients": ["Chicken breast", "Broccoli", "Bell peppers", "Soy sauce", "Brown rice"],
            "instructions": ["Cook rice", "Stir-fry sliced chicken", "Add vegetables and sauce", "Serve over rice"],
            "nutrition": {"protein": 38, "carbs": 55, "fat": 14, "fiber": 6, "calcium": 80, "iron": 3},
            "allergens": ["soy"],
            "kid_friendly_score": 8,
            "portability_score": 6,
            "prep_tips": ["Prep vegetables in the morning", "Use a hot pan"],
            "storage_tips": ["Keep in airtight container", "Reheat in pan"],
            "emoji": "🥦",
        },
        {
            "name": "Turkey Meatballs with Spaghetti",
            "description": "Lean turkey meatballs in tomato sauce over whole wheat spaghetti",
            "calories": 560,
            "prep_time": "35 min",
            "difficulty": "medium",
            "ingredients": ["Ground turkey", "Breadcrumbs", "Egg", "Tomato sauce", "Whole wheat spaghetti"],
            "instructions": ["Mix turkey, breadcrumbs and egg", "Roll into meatballs and bake", "Simmer in sauce", "Serve over spaghetti"],
            "nutrition": {"protein": 36, "carbs": 62, "fat": 15, "fiber": 8, "calcium": 110, "iron": 4},
            "allergens": ["gluten", "eggs"],
            "kid_friendly_score": 10,
            "portability_score": 5,
            "prep_tips": ["Double the batch and freeze half", "Let kids roll meatballs"],
            "storage_tips": ["Freeze meatballs in sauce", "Reheat covered"],
            "emoji": "🍝",
        },
        {
            "name": "Black Bean Tacos",
            "description": "Soft corn tortillas with spiced black beans, corn salsa, and avocado",
            "calories": 480,
            "prep_time": "20 min",
            "difficulty": "easy",
            "ingredients": ["Corn tortillas", "Black beans", "Corn", "Tomato", "Avocado"],
            "instructions": ["Warm beans with spices", "Mix corn and tomato salsa", "Warm tortillas", "Assemble with avocado"],
            "nutrition": {"protein": 18, "carbs": 68, "fat": 16, "fiber": 15, "calcium": 120, "iron": 4},
            "allergens": [],
            "kid_friendly_score": 8,
            "portability_score": 6,
            "prep_tips": ["Set up a taco bar", "Mash beans for younger kids"],
            "storage_tips": ["Store fillings separately", "Slice avocado just before serving"],
            "emoji": "🌮",
        },
        {
            "name": "Beef and Vegetable Stew",
            "description": "Slow-simmered beef stew with carrots, potatoes, and peas",
            "calories": 530,
            "prep_time": "45 min",
            "difficulty": "medium",
            "ingredients": ["Stewing beef", "Carrots", "Potatoes", "Peas", "Beef stock"],
            "instructions": ["Brown the beef", "Add vegetables and stock", "Simmer until tender", "Stir in peas before serving"],
            "nutrition": {"protein": 35, "carbs": 45, "fat": 18, "fiber": 7, "calcium": 60, "iron": 5},
            "allergens": [],
            "kid_friendly_score": 7,
            "portability_score": 7,
            "prep_tips": ["Use a slow cooker on busy days", "Cut vegetables small"],
            "storage_tips": ["Keeps 3 days refrigerated", "Freezes well"],
            "emoji": "🍲",
        },
        {
            "name": "Vegetable Fried Rice with Egg",
            "description": "Day-old rice fried with mixed vegetables, scrambled egg, and tofu",
            "calories": 490,
            "prep_time": "20 min",
            "difficulty": "easy",
            "ingredients": ["Cooked rice", "Eggs", "Tofu", "Mixed vegetables", "Soy sauce"],
            "instructions": ["Scramble eggs and set aside", "Fry tofu and vegetables", "Add rice and soy sauce", "Fold the eggs back in"],
            "nutrition": {"protein": 22, "carbs": 64, "fat": 15, "fiber": 5, "calcium": 180, "iron": 3},
            "allergens": ["eggs", "soy"],
            "kid_friendly_score": 9,
            "portability_score": 8,
            "prep_tips": ["Use leftover rice", "Cut tofu into small cubes"],
            "storage_tips": ["Refrigerate promptly", "Reheat until steaming"],
            "emoji": "🍳",
        },
        {
            "name": "Lentil and Spinach Curry",
            "description": "Mild red lentil curry with spinach and coconut milk over basmati rice",
            "calories": 510,
            "prep_time": "30 min",
            "difficulty": "easy",
            "ingredients": ["Red lentils", "Spinach", "Coconut milk", "Onion", "Basmati rice"],
            "instructions": ["Soften onion with mild spices", "Add lentils and water", "Simmer until soft", "Stir in spinach and coconut milk"],
            "nutrition": {"protein": 24, "carbs": 70, "fat": 14, "fiber": 12, "calcium": 140, "iron": 6},
            "allergens": [],
            "kid_friendly_score": 7,
            "portability_score": 7,
            "prep_tips": ["Keep spices mild for kids", "Cook rice while lentils simmer"],
            "storage_tips": ["Keeps 4 days refrigerated", "Add water when reheating"],
            "emoji": "🍛",
        },
    ],
    "snack": [
        {
            "name": "Apple Slices with Peanut Butter",
            "description": "Fresh apple slices with creamy peanut butter for dipping",
            "calories": 180,
            "prep_time": "5 min",
            "difficulty": "easy",
            "ingredients": ["Apple", "Peanut butter"],
            "instructions": ["Slice apple", "Serve with peanut butter for dipping"],
            "nutrition": {"protein": 8, "carbs": 20, "fat": 12, "fiber": 4, "calcium": 20, "iron": 1},
            "allergens": ["peanuts"],
            "kid_friendly_score": 9,
            "portability_score": 7,
            "prep_tips": ["Add lemon juice to prevent browning"],
            "storage_tips": ["Pack separately to prevent soggy apples"],
            "emoji": "🍎",
        },
        {
            "name": "Yogurt with Granola",
            "description": "Creamy yogurt topped with crunchy granola and berries",
            "calories": 160,
            "prep_time": "3 min",
            "difficulty": "easy",
            "ingredients": ["Greek yogurt", "Granola", "Berries"],
            "instructions": ["Spoon yogurt into container", "Top with granola and berries"],
            "nutrition": {"protein": 12, "carbs": 18, "fat": 6, "fiber": 3, "calcium": 150, "iron": 1},
            "allergens": ["milk"],
            "kid_friendly_score": 8,
            "portability_score": 9,
            "prep_tips": ["Pack granola separately to keep crunchy"],
            "storage_tips": ["Keep cold", "Assemble just before eating"],
            "emoji": "🥛",
        },
        {
            "name": "Cheese and Crackers",
            "description": "Whole grain crackers with cheese cubes and grapes",
            "calories": 170,
            "prep_time": "2 min",
            "difficulty": "easy",
            "ingredients": ["Whole grain crackers", "Cheese cubes", "Grapes"],
            "instructions": ["Arrange crackers and cheese", "Add grapes on the side"],
            "nutrition": {"protein": 8, "carbs": 15, "fat": 10, "fiber": 2, "calcium": 200, "iron": 1},
            "allergens": ["milk", "gluten"],
            "kid_friendly_score": 9,
            "portability_score": 10,
            "prep_tips": ["Use fun shaped crackers", "Cut cheese into cubes"],
            "storage_tips": ["Keep cheese cold", "Pack in compartmented container"],
            "emoji": "🧀",
        },
        {
            "name": "Trail Mix",
            "description": "Homemade mix of nuts, dried fruit, and chocolate chips",
            "calories": 190,
            "prep_time": "5 min",
            "difficulty": "easy",
            "ingredients": ["Almonds", "Dried cranberries", "Chocolate chips", "Pretzels"],
            "instructions": ["Mix all ingredients", "Store in small containers"],
            "nutrition": {"protein": 6, "carbs": 22, "fat": 10, "fiber": 3, "calcium": 50, "iron": 2},
            "allergens": ["nuts", "milk"],
            "kid_friendly_score": 9,
            "portability_score": 10,
            "prep_tips": ["Let kids help mix", "Make in bulk"],
            "storage_tips": ["Store in airtight containers", "Portion into small bags"],
            "emoji": "🥜",
        },
        {
            "name": "Veggie Sticks with Hummus",
            "description": "Colorful vegetable sticks with creamy hummus dip",
            "calories": 140,
            "prep_time": "8 min",
            "difficulty": "easy",
            "ingredients": ["Carrots", "Celery", "Bell peppers", "Hummus"],
            "instructions": ["Cut vegetables into sticks", "Serve with hummus for dipping"],
            "nutrition": {"protein": 6, "carbs": 16, "fat": 8, "fiber": 5, "calcium": 60, "iron": 2},
            "allergens": ["sesame"],
            "kid_friendly_score": 7,
            "portability_score": 9,
            "prep_tips": ["Cut vegetables the night before", "Use colorful vegetables"],
            "storage_tips": ["Keep vegetables crisp in water", "Pack hummus separately"],
            "emoji": "🥕",
        },
        {
            "name": "Banana with Almond Butter",
            "description": "Sliced banana with almond butter for dipping",
            "calories": 200,
            "prep_time": "3 min",
            "difficulty": "easy",
            "ingredients": ["Banana", "Almond butter"],
            "instructions": ["Slice banana", "Serve with almond butter"],
            "nutrition": {"protein": 7, "carbs": 24, "fat": 12, "fiber": 4, "calcium": 80, "iron": 1},
            "allergens": ["nuts"],
            "kid_friendly_score": 8,
            "portability_score": 7,
            "prep_tips": ["Add lemon juice to prevent browning"],
            "storage_tips": ["Pack banana and butter separately"],
            "emoji": "🍌",
        },
        {
            "name": "Homemade Granola Bars",
            "description": "Chewy granola bars made with oats, honey, and dried fruit",
            "calories": 185,
            "prep_time": "25 min",
            "difficulty": "medium",
            "ingredients": ["Oats", "Honey", "Peanut butter", "Dried fruit", "Seeds"],
            "instructions": ["Mix dry ingredients", "Heat honey and peanut butter", "Combine and press into pan", "Cool and cut"],
            "nutrition": {"protein": 6, "carbs": 26, "fat": 8, "fiber": 4, "calcium": 40, "iron": 2},
            "allergens": ["peanuts"],
            "kid_friendly_score": 9,
            "portability_score": 10,
            "prep_tips": ["Make batch on weekends", "Let kids help mix"],
            "storage_tips": ["Wrap individually", "Store at room temperature"],
            "emoji": "🍪",
        },
    ],
}

# Minimal per-slot replacements used when a single-meal regeneration fails.
DEFAULT_ALTERNATIVES: Dict[str, Dict[str, str]] = {
    "breakfast": {
        "name": "Overnight Oats with Berries",
        "description": "Creamy oats with fresh berries, prepared the night before",
        "emoji": "🥣",
    },
    "lunch": {
        "name": "Turkey and Cheese Roll-ups",
        "description": "Sliced turkey and cheese rolled up with vegetables",
        "emoji": "🥪",
    },
    "dinner": {
        "name": "Chicken Vegetable Stir-Fry",
        "description": "Quick stir-fried chicken with broccoli, peppers, and rice",
        "emoji": "🥦",
    },
    "snack": {
        "name": "Yogurt with Granola",
        "description": "Creamy yogurt topped with crunchy granola",
        "emoji": "🥛",
    },
}
