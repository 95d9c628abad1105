"""Built-in catalog of common Indian dishes, values per 100 g."""

from nutrition_recommender.domain.foods import (
    CookingMethod,
    FoodCategory,
    FoodRecord,
    NutritionFacts,
    PortionGuide,
    RegionalAvailability,
)

NORTH = "North Indian"
SOUTH = "South Indian"
WEST = "West Indian"

SAMPLE_FOODS: tuple[FoodRecord, ...] = (
    FoodRecord(
        id="dal_makhani",
        name="Dal Makhani",
        aliases=("dal makhni", "makhani dal", "black dal", "काली दाल"),
        category=FoodCategory.LEGUME_DISH,
        nutrition=NutritionFacts(
            calories=150.0,
            protein_g=8.0,
            carbs_g=18.0,
            fat_g=6.0,
            fiber_g=4.0,
            vitamins={"B1": 0.2, "B6": 0.1, "folate": 45.0},
            minerals={"iron": 2.5, "magnesium": 40.0, "potassium": 300.0},
        ),
        cooking_method=CookingMethod(
            name="dum",
            description="Slow cooked with cream and butter",
            ingredients=("black lentils", "cream", "butter", "tomatoes"),
            nutrition_multiplier=1.2,
        ),
        regions=RegionalAvailability(NORTH, (NORTH, "Central Indian")),
        portion_guide=PortionGuide({"katori": 150.0, "spoon": 15.0}, 150.0),
    ),
    FoodRecord(
        id="dal_tadka",
        name="Dal Tadka",
        aliases=("dal", "lentils", "arhar dal"),
        category=FoodCategory.LEGUME_DISH,
        nutrition=NutritionFacts(
            calories=150.0,
            protein_g=12.0,
            carbs_g=20.0,
            fat_g=4.0,
            fiber_g=8.0,
            vitamins={"B1": 0.3, "C": 15.0, "B6": 0.2},
            minerals={"iron": 3.5, "potassium": 350.0, "magnesium": 45.0},
        ),
        cooking_method=CookingMethod(
            name="tadka",
            description="Tempered with spices",
            ingredients=("lentils", "oil", "cumin", "turmeric"),
        ),
        regions=RegionalAvailability(NORTH, (NORTH, "Central Indian")),
        portion_guide=PortionGuide({"katori": 150.0}, 150.0),
    ),
    FoodRecord(
        id="basmati_rice",
        name="Basmati Rice",
        aliases=("basmati", "white rice", "चावल"),
        category=FoodCategory.STAPLE_GRAIN,
        nutrition=NutritionFacts(
            calories=130.0,
            protein_g=2.7,
            carbs_g=28.0,
            fat_g=0.3,
            fiber_g=0.4,
            vitamins={"B1": 0.07, "B3": 1.6},
            minerals={"iron": 0.8, "magnesium": 25.0},
        ),
        cooking_method=CookingMethod(
            name="boiled",
            description="Boiled in water until tender",
            ingredients=("basmati rice", "water", "salt"),
        ),
        regions=RegionalAvailability(NORTH, (NORTH, SOUTH, "Central Indian")),
        portion_guide=PortionGuide({"katori": 150.0, "spoon": 20.0}, 150.0),
    ),
    FoodRecord(
        id="whole_wheat_roti",
        name="Whole Wheat Roti",
        aliases=("roti", "chapati", "phulka"),
        category=FoodCategory.FLATBREAD,
        nutrition=NutritionFacts(
            calories=240.0,
            protein_g=8.0,
            carbs_g=46.0,
            fat_g=1.5,
            fiber_g=6.5,
            vitamins={"B1": 0.3, "B3": 3.0},
            minerals={"iron": 3.0, "magnesium": 60.0},
        ),
        cooking_method=CookingMethod(
            name="tawa",
            description="Cooked on a griddle",
            ingredients=("wheat flour", "water", "salt"),
        ),
        regions=RegionalAvailability(NORTH, (NORTH, "Central Indian", WEST)),
        portion_guide=PortionGuide({"roti": 30.0}, 30.0),
    ),
    FoodRecord(
        id="aloo_gobi",
        name="Aloo Gobi",
        aliases=("potato cauliflower", "आलू गोभी"),
        category=FoodCategory.VEGETABLE_DISH,
        nutrition=NutritionFacts(
            calories=110.0,
            protein_g=3.0,
            carbs_g=20.0,
            fat_g=3.0,
            fiber_g=4.0,
            vitamins={"C": 48.2, "K": 15.5, "B6": 0.3},
            minerals={"potassium": 421.0, "phosphorus": 44.0},
        ),
        cooking_method=CookingMethod(
            name="bhuna",
            description="Dry roasted with spices",
            ingredients=("potato", "cauliflower", "onion", "spices", "oil"),
            nutrition_multiplier=1.1,
        ),
        regions=RegionalAvailability(NORTH, (NORTH, "Central Indian")),
        portion_guide=PortionGuide({"katori": 100.0}, 100.0),
    ),
    FoodRecord(
        id="mixed_vegetables",
        name="Mixed Vegetables (Sabzi)",
        aliases=("sabzi", "mixed veg"),
        category=FoodCategory.VEGETABLE_DISH,
        nutrition=NutritionFacts(
            calories=80.0,
            protein_g=3.0,
            carbs_g=15.0,
            fat_g=2.0,
            fiber_g=5.0,
            vitamins={"C": 45.0, "K": 20.0, "A": 15.0},
            minerals={"potassium": 300.0, "calcium": 40.0},
        ),
        cooking_method=CookingMethod(
            name="bhuna",
            description="Sautéed with spices",
            ingredients=("vegetables", "oil", "onion", "spices"),
        ),
        regions=RegionalAvailability("All India", (NORTH, SOUTH, WEST)),
        portion_guide=PortionGuide({"katori": 100.0}, 100.0),
    ),
    FoodRecord(
        id="rajma",
        name="Rajma (Kidney Bean Curry)",
        aliases=("rajma", "kidney beans", "bean curry"),
        category=FoodCategory.CURRY,
        nutrition=NutritionFacts(
            calories=180.0,
            protein_g=15.0,
            carbs_g=25.0,
            fat_g=3.0,
            fiber_g=10.0,
            vitamins={"B1": 0.4, "B6": 0.3, "C": 8.0},
            minerals={"iron": 4.0, "potassium": 400.0, "magnesium": 60.0},
        ),
        cooking_method=CookingMethod(
            name="dum",
            description="Slow cooked curry",
            ingredients=("kidney beans", "onion", "tomato", "spices"),
        ),
        regions=RegionalAvailability(NORTH, (NORTH, "Central Indian")),
        portion_guide=PortionGuide({"katori": 150.0}, 150.0),
    ),
    FoodRecord(
        id="palak_paneer",
        name="Palak Paneer",
        aliases=("spinach paneer", "saag paneer"),
        category=FoodCategory.CURRY,
        nutrition=NutritionFacts(
            calories=180.0,
            protein_g=9.0,
            carbs_g=6.0,
            fat_g=13.0,
            fiber_g=2.5,
            vitamins={"A": 280.0, "C": 12.0, "K": 180.0},
            minerals={"iron": 2.7, "calcium": 210.0},
        ),
        cooking_method=CookingMethod(
            name="bhuna",
            description="Spinach puree simmered with paneer cubes",
            ingredients=("spinach", "paneer", "cream", "onion", "spices"),
        ),
        regions=RegionalAvailability(NORTH, (NORTH,)),
        portion_guide=PortionGuide({"katori": 150.0}, 150.0),
    ),
    FoodRecord(
        id="idli",
        name="Idli",
        aliases=("steamed rice cake",),
        category=FoodCategory.STAPLE_GRAIN,
        nutrition=NutritionFacts(
            calories=130.0,
            protein_g=4.5,
            carbs_g=26.0,
            fat_g=0.4,
            fiber_g=1.5,
            vitamins={"B1": 0.1},
            minerals={"iron": 0.9},
        ),
        cooking_method=CookingMethod(
            name="steamed",
            description="Fermented batter steamed in moulds",
            ingredients=("rice", "urad dal", "salt"),
        ),
        regions=RegionalAvailability(SOUTH, (SOUTH,)),
        portion_guide=PortionGuide({"piece": 40.0}, 80.0),
    ),
    FoodRecord(
        id="sambar",
        name="Sambar",
        aliases=("sambhar", "lentil vegetable stew"),
        category=FoodCategory.LEGUME_DISH,
        nutrition=NutritionFacts(
            calories=65.0,
            protein_g=3.5,
            carbs_g=9.0,
            fat_g=1.8,
            fiber_g=2.5,
            vitamins={"C": 6.0, "A": 40.0},
            minerals={"iron": 1.1, "potassium": 180.0},
        ),
        cooking_method=CookingMethod(
            name="simmered",
            description="Toor dal simmered with vegetables and tamarind",
            ingredients=("toor dal", "vegetables", "tamarind", "sambar powder"),
        ),
        regions=RegionalAvailability(SOUTH, (SOUTH,)),
        portion_guide=PortionGuide({"katori": 150.0}, 150.0),
    ),
    FoodRecord(
        id="poha",
        name="Poha",
        aliases=("kanda poha", "flattened rice"),
        category=FoodCategory.SNACK,
        nutrition=NutritionFacts(
            calories=130.0,
            protein_g=2.6,
            carbs_g=23.0,
            fat_g=3.0,
            fiber_g=1.1,
            vitamins={"C": 2.0},
            minerals={"iron": 2.6},
        ),
        cooking_method=CookingMethod(
            name="tempered",
            description="Flattened rice tempered with onion and curry leaves",
            ingredients=("flattened rice", "peanuts", "onion", "oil", "curry leaves"),
        ),
        regions=RegionalAvailability(WEST, (WEST, "Central Indian")),
        portion_guide=PortionGuide({"katori": 120.0}, 120.0),
    ),
    FoodRecord(
        id="roasted_chana",
        name="Roasted Chana",
        aliases=("bhuna chana", "roasted gram"),
        category=FoodCategory.SNACK,
        nutrition=NutritionFacts(
            calories=360.0,
            protein_g=20.0,
            carbs_g=58.0,
            fat_g=5.0,
            fiber_g=17.0,
            vitamins={"B6": 0.5, "folate": 150.0},
            minerals={"iron": 6.0, "magnesium": 110.0},
        ),
        cooking_method=CookingMethod(
            name="roasted",
            description="Dry roasted in sand or a pan",
            ingredients=("bengal gram", "salt"),
        ),
        regions=RegionalAvailability(NORTH, (NORTH, "East Indian")),
        portion_guide=PortionGuide({"handful": 30.0}, 30.0),
    ),
    FoodRecord(
        id="sprouts_chaat",
        name="Moong Sprouts Chaat",
        aliases=("sprouts salad", "moong chaat"),
        category=FoodCategory.SNACK,
        nutrition=NutritionFacts(
            calories=100.0,
            protein_g=7.0,
            carbs_g=15.0,
            fat_g=1.0,
            fiber_g=4.0,
            vitamins={"C": 13.0, "folate": 60.0},
            minerals={"iron": 1.5},
        ),
        cooking_method=CookingMethod(
            name="raw",
            description="Tossed with onion, tomato and lemon",
            ingredients=("moong sprouts", "onion", "tomato", "lemon"),
        ),
        regions=RegionalAvailability(WEST, (WEST, NORTH)),
        portion_guide=PortionGuide({"katori": 100.0}, 100.0),
    ),
    FoodRecord(
        id="masala_chai",
        name="Masala Chai",
        aliases=("chai", "tea"),
        category=FoodCategory.BEVERAGE,
        nutrition=NutritionFacts(
            calories=50.0,
            protein_g=1.6,
            carbs_g=7.0,
            fat_g=1.7,
            minerals={"calcium": 55.0},
        ),
        cooking_method=CookingMethod(
            name="brewed",
            description="Tea leaves boiled with milk, ginger and cardamom",
            ingredients=("tea leaves", "milk", "sugar", "ginger", "cardamom"),
        ),
        regions=RegionalAvailability(NORTH, (NORTH, WEST, "East Indian")),
        portion_guide=PortionGuide({"cup": 150.0}, 150.0),
    ),
    FoodRecord(
        id="chaas",
        name="Chaas",
        aliases=("buttermilk", "spiced buttermilk"),
        category=FoodCategory.BEVERAGE,
        nutrition=NutritionFacts(
            calories=40.0,
            protein_g=3.3,
            carbs_g=4.8,
            fat_g=0.9,
            minerals={"calcium": 116.0},
        ),
        cooking_method=CookingMethod(
            name="churned",
            description="Curd churned with water and roasted cumin",
            ingredients=("curd", "water", "cumin", "salt"),
        ),
        regions=RegionalAvailability(WEST, (WEST, NORTH)),
        portion_guide=PortionGuide({"glass": 250.0}, 250.0),
    ),
    FoodRecord(
        id="gulab_jamun",
        name="Gulab Jamun",
        aliases=("jamun",),
        category=FoodCategory.DESSERT,
        nutrition=NutritionFacts(
            calories=320.0,
            protein_g=4.5,
            carbs_g=50.0,
            fat_g=12.0,
            fiber_g=0.3,
        ),
        cooking_method=CookingMethod(
            name="fried",
            description="Milk dumplings fried and soaked in sugar syrup",
            ingredients=("milk solids", "flour", "ghee", "sugar"),
        ),
        regions=RegionalAvailability(NORTH, (NORTH, "East Indian")),
        portion_guide=PortionGuide({"piece": 40.0}, 40.0),
    ),
)
