"""Indian food catalog with nutrients per standard serving."""

from wellness_tracker.domain.catalog import Catalog, Food

FOODS: tuple[Food, ...] = (
    # Rice & grains
    Food("1", "Basmati Rice (Steamed)", "Rice & Grains", "1 cup (150g)", 205, 4.3, 45, 0.4, 0.6),
    Food("2", "Jeera Rice", "Rice & Grains", "1 cup (150g)", 245, 4.5, 48, 4, 0.8),
    Food("3", "Biryani (Vegetable)", "Rice & Grains", "1 plate (200g)", 380, 8, 65, 12, 3),
    Food("4", "Biryani (Chicken)", "Rice & Grains", "1 plate (250g)", 450, 25, 55, 15, 2),
    Food("5", "Pulao", "Rice & Grains", "1 cup (150g)", 320, 6, 58, 8, 2),
    # Bread
    Food("6", "Chapati/Roti", "Bread", "1 medium (30g)", 80, 3, 15, 1, 2),
    Food("7", "Naan", "Bread", "1 piece (60g)", 160, 5, 30, 3, 1),
    Food("8", "Paratha (Plain)", "Bread", "1 piece (50g)", 150, 4, 20, 6, 2),
    Food("9", "Stuffed Paratha (Aloo)", "Bread", "1 piece (80g)", 220, 5, 30, 8, 3),
    # Dal & lentils
    Food("10", "Dal Tadka", "Dal & Lentils", "1 bowl (150ml)", 180, 12, 25, 4, 8),
    Food("11", "Dal Makhani", "Dal & Lentils", "1 bowl (150ml)", 250, 14, 20, 12, 6),
    Food("12", "Sambar", "Dal & Lentils", "1 bowl (150ml)", 120, 8, 18, 2, 5),
    Food("13", "Rajma", "Dal & Lentils", "1 bowl (150ml)", 200, 15, 30, 3, 10),
    # Vegetables
    Food("14", "Aloo Gobi", "Vegetables", "1 serving (100g)", 150, 3, 20, 6, 4),
    Food("15", "Palak Paneer", "Vegetables", "1 serving (150g)", 280, 18, 10, 20, 3),
    Food("16", "Bhindi Masala", "Vegetables", "1 serving (100g)", 120, 2, 12, 7, 3),
    Food("17", "Baingan Bharta", "Vegetables", "1 serving (100g)", 140, 2, 15, 8, 5),
    # Non-vegetarian
    Food("18", "Chicken Curry", "Non-Vegetarian", "1 serving (150g)", 320, 30, 8, 18, 2),
    Food("19", "Butter Chicken", "Non-Vegetarian", "1 serving (150g)", 380, 28, 10, 25, 1),
    Food("20", "Fish Curry", "Non-Vegetarian", "1 serving (150g)", 280, 25, 6, 16, 1),
    Food("21", "Mutton Curry", "Non-Vegetarian", "1 serving (150g)", 420, 35, 5, 28, 1),
    # Snacks
    Food("22", "Samosa", "Snacks", "1 piece (50g)", 180, 4, 22, 8, 2),
    Food("23", "Pakora", "Snacks", "4 pieces (60g)", 220, 6, 20, 12, 3),
    Food("24", "Dhokla", "Snacks", "2 pieces (80g)", 160, 5, 28, 3, 2),
    Food("25", "Idli", "Snacks", "2 pieces (60g)", 120, 4, 24, 1, 1),
    Food("26", "Dosa (Plain)", "Snacks", "1 piece (80g)", 180, 6, 30, 4, 2),
    # Sweets
    Food("27", "Gulab Jamun", "Sweets", "1 piece (30g)", 150, 3, 22, 6, 0),
    Food("28", "Rasgulla", "Sweets", "1 piece (25g)", 90, 2, 18, 1, 0),
    Food("29", "Kheer", "Sweets", "1 bowl (100ml)", 180, 4, 30, 5, 0),
    Food("30", "Halwa (Carrot)", "Sweets", "1 serving (80g)", 250, 4, 35, 10, 2),
)

FOOD_CATALOG: Catalog[Food] = Catalog(FOODS)
