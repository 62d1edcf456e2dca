"""
EvoFit Client Ailments Dictionary
Version 1.0.0

Static knowledge base of health conditions a client may report, grouped
into categories, each mapped to nutritional guidance for meal planning.

Loaded once by catalog.ailments; never mutated.
"""

from typing import Any, Dict, List

# ============================================================================
# AILMENT CATEGORIES
# ============================================================================

AILMENT_CATEGORIES: List[Dict[str, Any]] = [
    {
        "id": "digestive",
        "name": "Digestive Issues",
        "description": "Problems related to digestion, gut health, and gastrointestinal function",
        "icon": "🥗",
        "color": "green",
    },
    {
        "id": "energy_metabolism",
        "name": "Energy & Metabolism",
        "description": "Issues with energy levels, metabolism, and blood sugar regulation",
        "icon": "⚡",
        "color": "yellow",
    },
    {
        "id": "inflammatory",
        "name": "Inflammatory Conditions",
        "description": "Chronic inflammation, joint pain, and inflammatory responses",
        "icon": "🔥",
        "color": "red",
    },
    {
        "id": "mental_health",
        "name": "Mental Health",
        "description": "Mood, cognitive function, and mental wellness concerns",
        "icon": "🧠",
        "color": "purple",
    },
    {
        "id": "hormonal",
        "name": "Hormonal Issues",
        "description": "Hormonal imbalances and endocrine system concerns",
        "icon": "⚖️",
        "color": "pink",
    },
    {
        "id": "cardiovascular",
        "name": "Cardiovascular",
        "description": "Heart health, blood pressure, and circulation issues",
        "icon": "❤️",
        "color": "red",
    },
    {
        "id": "detox_cleansing",
        "name": "Detox & Cleansing",
        "description": "Liver function, detoxification, and cleansing support",
        "icon": "🌿",
        "color": "green",
    },
    {
        "id": "immune_system",
        "name": "Immune System",
        "description": "Immune function, allergies, and infection resistance",
        "icon": "🛡️",
        "color": "blue",
    },
    {
        "id": "skin_beauty",
        "name": "Skin & Beauty",
        "description": "Skin health, appearance, and beauty-related concerns",
        "icon": "✨",
        "color": "gold",
    },
]

# ============================================================================
# AILMENTS
# Catalog order is significant: by-category listings and searches return
# ailments in this order.
# ============================================================================

CLIENT_AILMENTS: List[Dict[str, Any]] = [
    # ===== DIGESTIVE =====
    {
        "id": "bloating",
        "name": "Bloating",
        "description": "Feeling of fullness and swelling in the abdominal area",
        "category": "digestive",
        "severity": "mild",
        "common_symptoms": ["Abdominal distension", "Feeling of fullness", "Gas", "Discomfort"],
        "nutritional_support": {
            "beneficial_foods": ["Ginger", "Peppermint", "Fennel", "Papaya", "Pineapple", "Probiotics", "Bone broth"],
            "avoid_foods": ["Carbonated drinks", "Beans", "Cruciferous vegetables (raw)", "Dairy", "High-sodium foods"],
            "key_nutrients": ["Digestive enzymes", "Probiotics", "Fiber (gradually)", "Potassium"],
            "meal_plan_focus": ["Anti-inflammatory foods", "Easy-to-digest proteins", "Cooked vegetables", "Herbal teas"],
        },
    },
    {
        "id": "ibs",
        "name": "Irritable Bowel Syndrome (IBS)",
        "description": "Chronic condition affecting the large intestine with cramping, bloating, and bowel changes",
        "category": "digestive",
        "severity": "moderate",
        "common_symptoms": ["Cramping", "Bloating", "Gas", "Diarrhea or constipation", "Mucus in stool"],
        "nutritional_support": {
            "beneficial_foods": ["Low-FODMAP foods", "Soluble fiber", "Bone broth", "Cooked vegetables", "Lean proteins"],
            "avoid_foods": ["High-FODMAP foods", "Trigger foods", "Processed foods", "Caffeine", "Alcohol"],
            "key_nutrients": ["Soluble fiber", "Probiotics", "L-glutamine", "Omega-3 fatty acids"],
            "meal_plan_focus": ["Low-FODMAP meal plans", "Gut-healing foods", "Anti-inflammatory diet", "Stress-reducing foods"],
        },
        "medical_disclaimer": "Consult healthcare provider for proper IBS diagnosis and management",
    },
    {
        "id": "constipation",
        "name": "Constipation",
        "description": "Infrequent bowel movements or difficulty passing stool",
        "category": "digestive",
        "severity": "mild",
        "common_symptoms": ["Less than 3 bowel movements per week", "Hard stools", "Straining", "Feeling of incomplete evacuation"],
        "nutritional_support": {
            "beneficial_foods": ["High-fiber foods", "Prunes", "Flaxseeds", "Chia seeds", "Leafy greens", "Water-rich fruits"],
            "avoid_foods": ["Processed foods", "Red meat (excess)", "Dairy (if intolerant)", "Low-fiber foods"],
            "key_nutrients": ["Insoluble fiber", "Magnesium", "Vitamin C", "Potassium"],
            "meal_plan_focus": ["High-fiber meals", "Adequate hydration", "Regular meal timing", "Movement-promoting foods"],
        },
    },
    {
        "id": "acid_reflux",
        "name": "Acid Reflux / GERD",
        "description": "Stomach acid backing up into the esophagus causing heartburn and discomfort",
        "category": "digestive",
        "severity": "moderate",
        "common_symptoms": ["Heartburn", "Regurgitation", "Chest pain", "Difficulty swallowing", "Chronic cough"],
        "nutritional_support": {
            "beneficial_foods": ["Oatmeal", "Bananas", "Melons", "Fennel", "Parsley", "Rice", "Lean proteins"],
            "avoid_foods": ["Citrus fruits", "Tomatoes", "Spicy foods", "Chocolate", "Caffeine", "Alcohol", "Fried foods"],
            "key_nutrients": ["Alkalizing minerals", "Complex carbohydrates", "Lean proteins", "B-vitamins"],
            "meal_plan_focus": ["Alkaline-promoting foods", "Small frequent meals", "Low-acid options", "Easily digestible foods"],
        },
    },

    # ===== ENERGY & METABOLISM =====
    {
        "id": "chronic_fatigue",
        "name": "Chronic Fatigue",
        "description": "Persistent, overwhelming tiredness that doesn't improve with rest",
        "category": "energy_metabolism",
        "severity": "moderate",
        "common_symptoms": ["Persistent exhaustion", "Brain fog", "Muscle weakness", "Sleep problems", "Memory issues"],
        "nutritional_support": {
            "beneficial_foods": ["Iron-rich foods", "B-vitamin rich foods", "Complex carbohydrates", "Lean proteins", "Dark leafy greens"],
            "avoid_foods": ["Refined sugars", "Processed foods", "Excessive caffeine", "Alcohol", "Trans fats"],
            "key_nutrients": ["Iron", "B-vitamins", "Vitamin D", "Magnesium", "Coenzyme Q10"],
            "meal_plan_focus": ["Energy-sustaining foods", "Nutrient-dense meals", "Blood sugar stabilizing", "Mitochondrial support"],
        },
        "medical_disclaimer": "Consult healthcare provider to rule out underlying medical conditions",
    },
    {
        "id": "low_energy",
        "name": "Low Energy",
        "description": "General feeling of tiredness and lack of vitality",
        "category": "energy_metabolism",
        "severity": "mild",
        "common_symptoms": ["Tiredness", "Lack of motivation", "Afternoon crashes", "Difficulty concentrating"],
        "nutritional_support": {
            "beneficial_foods": ["Whole grains", "Nuts", "Seeds", "Fruits", "Vegetables", "Lean proteins", "Green tea"],
            "avoid_foods": ["Refined sugars", "Energy drinks", "Processed snacks", "Large heavy meals"],
            "key_nutrients": ["B-vitamins", "Iron", "Magnesium", "Vitamin C", "Complex carbohydrates"],
            "meal_plan_focus": ["Balanced blood sugar", "Regular meal timing", "Energizing superfoods", "Hydration support"],
        },
    },
    {
        "id": "insulin_resistance",
        "name": "Insulin Resistance",
        "description": "Body's cells become resistant to insulin, leading to blood sugar issues",
        "category": "energy_metabolism",
        "severity": "moderate",
        "common_symptoms": ["Blood sugar spikes", "Cravings", "Weight gain around midsection", "Fatigue after meals"],
        "nutritional_support": {
            "beneficial_foods": ["Low-glycemic foods", "Fiber-rich vegetables", "Lean proteins", "Healthy fats", "Cinnamon", "Chromium-rich foods"],
            "avoid_foods": ["Refined carbohydrates", "Sugary foods", "Processed foods", "High-glycemic fruits"],
            "key_nutrients": ["Chromium", "Magnesium", "Fiber", "Alpha-lipoic acid", "Omega-3 fatty acids"],
            "meal_plan_focus": ["Low-glycemic index meals", "Portion control", "Protein with each meal", "Anti-inflammatory foods"],
        },
        "medical_disclaimer": "Work with healthcare provider for blood sugar monitoring and management",
    },
    {
        "id": "diabetes",
        "name": "Type 2 Diabetes",
        "description": "Chronic condition characterized by high blood sugar levels due to insulin resistance",
        "category": "energy_metabolism",
        "severity": "severe",
        "common_symptoms": ["Frequent urination", "Excessive thirst", "Fatigue", "Blurred vision", "Slow healing wounds"],
        "nutritional_support": {
            "beneficial_foods": ["Low-glycemic vegetables", "Lean proteins", "Whole grains", "Healthy fats", "Fiber-rich foods"],
            "avoid_foods": ["Refined sugars", "High-glycemic foods", "Processed foods", "Sugary drinks"],
            "key_nutrients": ["Chromium", "Magnesium", "Alpha-lipoic acid", "Fiber", "Antioxidants"],
            "meal_plan_focus": ["Blood sugar control", "Low-glycemic meals", "Portion control", "Consistent meal timing"],
        },
        "medical_disclaimer": "Essential to work with healthcare provider for diabetes management and medication adjustments",
    },

    # ===== INFLAMMATORY =====
    {
        "id": "joint_pain",
        "name": "Joint Pain",
        "description": "Pain, stiffness, or swelling in one or more joints",
        "category": "inflammatory",
        "severity": "moderate",
        "common_symptoms": ["Joint stiffness", "Swelling", "Reduced range of motion", "Pain with movement"],
        "nutritional_support": {
            "beneficial_foods": ["Fatty fish", "Turmeric", "Ginger", "Leafy greens", "Berries", "Cherries", "Olive oil"],
            "avoid_foods": ["Processed foods", "Sugar", "Trans fats", "Excessive omega-6 oils", "Nightshade vegetables (if sensitive)"],
            "key_nutrients": ["Omega-3 fatty acids", "Curcumin", "Vitamin D", "Vitamin C", "Antioxidants"],
            "meal_plan_focus": ["Anti-inflammatory diet", "Mediterranean-style meals", "Antioxidant-rich foods", "Joint-supporting nutrients"],
        },
    },
    {
        "id": "arthritis",
        "name": "Arthritis",
        "description": "Inflammation of one or more joints causing pain and stiffness",
        "category": "inflammatory",
        "severity": "moderate",
        "common_symptoms": ["Joint pain", "Swelling", "Stiffness", "Reduced mobility", "Morning stiffness"],
        "nutritional_support": {
            "beneficial_foods": ["Cold-water fish", "Colorful vegetables", "Whole grains", "Nuts", "Seeds", "Green tea"],
            "avoid_foods": ["Inflammatory foods", "Excess sugar", "Fried foods", "Refined grains"],
            "key_nutrients": ["Omega-3s", "Antioxidants", "Vitamin D", "Calcium", "Glucosamine"],
            "meal_plan_focus": ["Mediterranean diet", "Anti-inflammatory foods", "Joint-supporting nutrients", "Weight management"],
        },
        "medical_disclaimer": "Work with rheumatologist or healthcare provider for proper arthritis management",
    },
    {
        "id": "chronic_inflammation",
        "name": "Chronic Inflammation",
        "description": "Long-term inflammation that can contribute to various health issues",
        "category": "inflammatory",
        "severity": "moderate",
        "common_symptoms": ["General aches", "Fatigue", "Skin issues", "Digestive problems", "Mood changes"],
        "nutritional_support": {
            "beneficial_foods": ["Anti-inflammatory foods", "Colorful vegetables", "Berries", "Fatty fish", "Nuts", "Olive oil"],
            "avoid_foods": ["Processed foods", "Sugar", "Trans fats", "Refined carbs", "Excessive alcohol"],
            "key_nutrients": ["Omega-3 fatty acids", "Antioxidants", "Polyphenols", "Vitamin E", "Selenium"],
            "meal_plan_focus": ["Mediterranean diet", "Rainbow of colors", "Whole foods", "Anti-inflammatory spices"],
        },
    },

    # ===== MENTAL HEALTH =====
    {
        "id": "anxiety",
        "name": "Anxiety",
        "description": "Persistent worry, nervousness, or fear that interferes with daily activities",
        "category": "mental_health",
        "severity": "moderate",
        "common_symptoms": ["Excessive worry", "Restlessness", "Fatigue", "Difficulty concentrating", "Sleep problems"],
        "nutritional_support": {
            "beneficial_foods": ["Magnesium-rich foods", "Complex carbs", "Fermented foods", "Green tea", "Dark chocolate", "Omega-3 rich fish"],
            "avoid_foods": ["Caffeine (excess)", "Alcohol", "Refined sugars", "Processed foods"],
            "key_nutrients": ["Magnesium", "B-vitamins", "Omega-3s", "Probiotics", "L-theanine"],
            "meal_plan_focus": ["Mood-stabilizing foods", "Gut-brain axis support", "Stress-reducing nutrients", "Regular meal timing"],
        },
        "medical_disclaimer": "Seek professional mental health support for anxiety management",
    },
    {
        "id": "depression",
        "name": "Depression",
        "description": "Persistent feelings of sadness, hopelessness, and loss of interest",
        "category": "mental_health",
        "severity": "moderate",
        "common_symptoms": ["Persistent sadness", "Loss of interest", "Fatigue", "Sleep changes", "Appetite changes"],
        "nutritional_support": {
            "beneficial_foods": ["Fatty fish", "Folate-rich foods", "Fermented foods", "Dark leafy greens", "Nuts", "Seeds"],
            "avoid_foods": ["Alcohol", "Highly processed foods", "Excess sugar", "Trans fats"],
            "key_nutrients": ["Omega-3s", "Folate", "B12", "Vitamin D", "Probiotics", "Tryptophan"],
            "meal_plan_focus": ["Mood-boosting foods", "Neurotransmitter support", "Anti-inflammatory diet", "Gut health"],
        },
        "medical_disclaimer": "Professional mental health treatment is essential for depression management",
    },
    {
        "id": "brain_fog",
        "name": "Brain Fog",
        "description": "Mental fatigue characterized by confusion, forgetfulness, and lack of focus",
        "category": "mental_health",
        "severity": "mild",
        "common_symptoms": ["Poor concentration", "Memory problems", "Mental fatigue", "Confusion", "Lack of clarity"],
        "nutritional_support": {
            "beneficial_foods": ["Blueberries", "Fatty fish", "Nuts", "Dark chocolate", "Green tea", "Avocados"],
            "avoid_foods": ["Processed foods", "Excess sugar", "Trans fats", "Alcohol"],
            "key_nutrients": ["Omega-3s", "Antioxidants", "B-vitamins", "Choline", "Phosphatidylserine"],
            "meal_plan_focus": ["Brain-boosting foods", "Cognitive function support", "Blood sugar stability", "Antioxidant-rich meals"],
        },
    },

    # ===== HORMONAL =====
    {
        "id": "pms",
        "name": "PMS (Premenstrual Syndrome)",
        "description": "Physical and emotional symptoms before menstruation",
        "category": "hormonal",
        "severity": "mild",
        "common_symptoms": ["Mood swings", "Bloating", "Breast tenderness", "Cravings", "Fatigue"],
        "nutritional_support": {
            "beneficial_foods": ["Complex carbs", "Calcium-rich foods", "Magnesium-rich foods", "Iron-rich foods", "Omega-3s"],
            "avoid_foods": ["Excess caffeine", "Alcohol", "High sodium", "Refined sugars"],
            "key_nutrients": ["Calcium", "Magnesium", "B6", "Iron", "Omega-3 fatty acids"],
            "meal_plan_focus": ["Hormone-balancing foods", "Nutrient timing", "Craving management", "Anti-inflammatory foods"],
        },
    },
    {
        "id": "menopause",
        "name": "Menopause Symptoms",
        "description": "Symptoms related to hormonal changes during menopause",
        "category": "hormonal",
        "severity": "moderate",
        "common_symptoms": ["Hot flashes", "Night sweats", "Mood changes", "Weight gain", "Sleep problems"],
        "nutritional_support": {
            "beneficial_foods": ["Phytoestrogen-rich foods", "Calcium-rich foods", "Whole grains", "Lean proteins", "Healthy fats"],
            "avoid_foods": ["Spicy foods", "Caffeine", "Alcohol", "Processed foods"],
            "key_nutrients": ["Phytoestrogens", "Calcium", "Vitamin D", "B-vitamins", "Omega-3s"],
            "meal_plan_focus": ["Hormone-supporting foods", "Bone health", "Weight management", "Cooling foods"],
        },
    },
    {
        "id": "thyroid_issues",
        "name": "Thyroid Issues",
        "description": "Problems with thyroid function affecting metabolism",
        "category": "hormonal",
        "severity": "moderate",
        "common_symptoms": ["Fatigue", "Weight changes", "Temperature sensitivity", "Hair loss", "Mood changes"],
        "nutritional_support": {
            "beneficial_foods": ["Iodine-rich foods", "Selenium-rich foods", "Zinc-rich foods", "Tyrosine-rich foods"],
            "avoid_foods": ["Goitrogenic foods (raw)", "Gluten (if sensitive)", "Soy (if sensitive)"],
            "key_nutrients": ["Iodine", "Selenium", "Zinc", "Tyrosine", "Iron"],
            "meal_plan_focus": ["Thyroid-supporting nutrients", "Metabolic support", "Anti-inflammatory foods", "Nutrient density"],
        },
        "medical_disclaimer": "Work with healthcare provider for thyroid monitoring and medication management",
    },

    # ===== CARDIOVASCULAR =====
    {
        "id": "high_blood_pressure",
        "name": "High Blood Pressure",
        "description": "Elevated blood pressure that increases cardiovascular risk",
        "category": "cardiovascular",
        "severity": "moderate",
        "common_symptoms": ["Often no symptoms", "Headaches", "Dizziness", "Chest pain"],
        "nutritional_support": {
            "beneficial_foods": ["Potassium-rich foods", "Magnesium-rich foods", "Garlic", "Beets", "Leafy greens", "Berries"],
            "avoid_foods": ["High sodium foods", "Processed foods", "Excess alcohol", "Saturated fats"],
            "key_nutrients": ["Potassium", "Magnesium", "Calcium", "Nitrates", "Antioxidants"],
            "meal_plan_focus": ["DASH diet principles", "Low sodium", "Heart-healthy foods", "Blood pressure support"],
        },
        "medical_disclaimer": "Regular monitoring and medical management essential for high blood pressure",
    },
    {
        "id": "hypertension",
        "name": "Hypertension (Stage 2)",
        "description": "More severe form of high blood pressure requiring immediate medical attention",
        "category": "cardiovascular",
        "severity": "severe",
        "common_symptoms": ["Severe headaches", "Shortness of breath", "Nosebleeds", "Anxiety", "Chest pain"],
        "nutritional_support": {
            "beneficial_foods": ["Low-sodium vegetables", "Potassium-rich fruits", "Whole grains", "Lean proteins", "Heart-healthy fats"],
            "avoid_foods": ["High sodium foods", "Processed meats", "Canned foods with salt", "Fast food", "Alcohol"],
            "key_nutrients": ["Potassium", "Magnesium", "Calcium", "Omega-3 fatty acids", "Fiber"],
            "meal_plan_focus": ["Strict DASH diet", "Very low sodium", "Heart protection", "Weight management"],
        },
        "medical_disclaimer": "Immediate medical management required for hypertension - work closely with cardiologist",
    },
    {
        "id": "high_cholesterol",
        "name": "High Cholesterol",
        "description": "Elevated cholesterol levels increasing heart disease risk",
        "category": "cardiovascular",
        "severity": "moderate",
        "common_symptoms": ["Usually no symptoms", "Chest pain (advanced)", "Fatigue"],
        "nutritional_support": {
            "beneficial_foods": ["Soluble fiber foods", "Nuts", "Olive oil", "Fatty fish", "Plant sterols", "Garlic"],
            "avoid_foods": ["Saturated fats", "Trans fats", "Processed meats", "Fried foods"],
            "key_nutrients": ["Soluble fiber", "Plant sterols", "Omega-3s", "Niacin", "Antioxidants"],
            "meal_plan_focus": ["Heart-healthy diet", "Cholesterol-lowering foods", "Mediterranean diet", "Fiber-rich meals"],
        },
        "medical_disclaimer": "Work with healthcare provider for cholesterol management and monitoring",
    },

    # ===== DETOX & CLEANSING =====
    {
        "id": "liver_congestion",
        "name": "Liver Congestion",
        "description": "Sluggish liver function affecting detoxification",
        "category": "detox_cleansing",
        "severity": "mild",
        "common_symptoms": ["Fatigue", "Digestive issues", "Skin problems", "Chemical sensitivities"],
        "nutritional_support": {
            "beneficial_foods": ["Cruciferous vegetables", "Beets", "Artichokes", "Garlic", "Turmeric", "Green tea"],
            "avoid_foods": ["Alcohol", "Processed foods", "Excess fats", "Toxins"],
            "key_nutrients": ["Sulfur compounds", "Antioxidants", "B-vitamins", "Choline", "Milk thistle"],
            "meal_plan_focus": ["Liver-supporting foods", "Detoxification support", "Phase I & II detox nutrients", "Gentle cleansing"],
        },
    },

    # ===== IMMUNE SYSTEM =====
    {
        "id": "frequent_infections",
        "name": "Frequent Infections",
        "description": "Recurring infections indicating compromised immune function",
        "category": "immune_system",
        "severity": "moderate",
        "common_symptoms": ["Recurring colds", "Slow healing", "Fatigue", "Swollen lymph nodes"],
        "nutritional_support": {
            "beneficial_foods": ["Vitamin C foods", "Zinc-rich foods", "Garlic", "Ginger", "Mushrooms", "Probiotics"],
            "avoid_foods": ["Excess sugar", "Processed foods", "Alcohol", "Trans fats"],
            "key_nutrients": ["Vitamin C", "Zinc", "Vitamin D", "Selenium", "Probiotics"],
            "meal_plan_focus": ["Immune-boosting foods", "Anti-viral nutrients", "Gut health support", "Antioxidant-rich diet"],
        },
        "medical_disclaimer": "Consult healthcare provider to investigate underlying immune system issues",
    },
    {
        "id": "allergies",
        "name": "Allergies",
        "description": "Immune system overreaction to normally harmless substances",
        "category": "immune_system",
        "severity": "mild",
        "common_symptoms": ["Sneezing", "Runny nose", "Itchy eyes", "Skin reactions", "Digestive upset"],
        "nutritional_support": {
            "beneficial_foods": ["Quercetin-rich foods", "Vitamin C foods", "Anti-inflammatory foods", "Local honey"],
            "avoid_foods": ["Known allergens", "Histamine-rich foods", "Inflammatory foods"],
            "key_nutrients": ["Quercetin", "Vitamin C", "Omega-3s", "Natural antihistamines"],
            "meal_plan_focus": ["Anti-allergic foods", "Immune modulation", "Inflammation reduction", "Histamine management"],
        },
    },

    # ===== SKIN & BEAUTY =====
    {
        "id": "acne",
        "name": "Acne",
        "description": "Skin condition with pimples, blackheads, and inflammation",
        "category": "skin_beauty",
        "severity": "mild",
        "common_symptoms": ["Pimples", "Blackheads", "Whiteheads", "Inflamed skin", "Scarring"],
        "nutritional_support": {
            "beneficial_foods": ["Low-glycemic foods", "Omega-3 rich foods", "Zinc-rich foods", "Antioxidant foods"],
            "avoid_foods": ["High-glycemic foods", "Dairy (if sensitive)", "Processed foods", "Trans fats"],
            "key_nutrients": ["Zinc", "Omega-3s", "Vitamin A", "Selenium", "Antioxidants"],
            "meal_plan_focus": ["Low-glycemic diet", "Anti-inflammatory foods", "Hormone-balancing foods", "Skin-supporting nutrients"],
        },
    },
    {
        "id": "eczema",
        "name": "Eczema",
        "description": "Inflammatory skin condition causing dry, itchy, red patches",
        "category": "skin_beauty",
        "severity": "moderate",
        "common_symptoms": ["Dry skin", "Itching", "Red patches", "Scaling", "Cracking"],
        "nutritional_support": {
            "beneficial_foods": ["Omega-3 rich foods", "Probiotics", "Anti-inflammatory foods", "Zinc-rich foods"],
            "avoid_foods": ["Common allergens", "Inflammatory foods", "Processed foods", "Excess sugar"],
            "key_nutrients": ["Omega-3s", "Probiotics", "Zinc", "Vitamin E", "Quercetin"],
            "meal_plan_focus": ["Anti-inflammatory diet", "Gut health support", "Skin barrier support", "Allergy management"],
        },
    },
]
