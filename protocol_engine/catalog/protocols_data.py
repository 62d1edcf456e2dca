"""
EvoFit Cleanse Protocols Dictionary
Version 1.0.0

Phased cleanse protocols drawn from traditional Western herbalism,
Ayurveda and modern integrative practice. Each protocol lists its
phases, herb components, supporting supplements, dietary guidelines,
contraindications and regional availability.

IMPORTANT: Educational content only. Every protocol requires a
healthcare provider's review before use.

target_ailments are tags. Some resolve to ailment catalog ids ("ibs",
"bloating"), others do not ("sibo", "mild_ibs").
"""

from typing import Any, Dict, List

# ============================================================================
# PROTOCOLS
# ============================================================================

CLEANSE_PROTOCOLS: List[Dict[str, Any]] = [
    # ===== TRADITIONAL =====
    {
        "id": "classic_triple_herb",
        "name": "Classic Triple Herb Protocol",
        "type": "traditional",
        "description": "The foundational Western herbal parasite cleanse using black walnut, wormwood, and cloves - targets all life stages of parasites",
        "target_parasites": ["roundworms", "pinworms", "tapeworms", "liver_flukes", "candida"],
        "target_ailments": ["bloating", "chronic_fatigue", "brain_fog", "ibs"],
        "intensity": "moderate",
        "duration": {"min": 21, "max": 42, "recommended": 30},
        "phases": [
            {
                "name": "Preparation Phase",
                "duration": 7,
                "description": "Prepare digestive system and support liver function",
                "objectives": ["Optimize digestion", "Support liver detox", "Begin biofilm disruption"],
                "key_actions": ["Start digestive enzymes", "Increase fiber gradually", "Begin liver support herbs"],
            },
            {
                "name": "Active Cleanse",
                "duration": 21,
                "description": "Full antiparasitic herb protocol targeting all parasite life stages",
                "objectives": ["Kill adult parasites", "Eliminate larvae", "Destroy eggs"],
                "key_actions": ["Triple herb daily dosing", "Monitor for die-off reactions", "Support elimination"],
            },
            {
                "name": "Restoration Phase",
                "duration": 14,
                "description": "Restore gut health and prevent reinfection",
                "objectives": ["Heal gut lining", "Restore microbiome", "Strengthen immunity"],
                "key_actions": ["Probiotic recolonization", "Gut healing nutrients", "Immune support"],
            },
        ],
        "herbs": [
            {
                "name": "Black Walnut Hull",
                "latin_name": "Juglans nigra",
                "active_compounds": ["Juglone", "Tannins", "Organic iodine"],
                "mechanism": "Oxygenates blood, kills adult parasites, antifungal properties",
                "dosage": {"amount": "500-1000mg", "frequency": "2x daily", "timing": "Between meals"},
                "form": "capsule",
                "priority": "primary",
                "evidence_level": "Traditional use + antimicrobial studies",
            },
            {
                "name": "Wormwood",
                "latin_name": "Artemisia absinthium",
                "active_compounds": ["Artemisinin", "Absinthin", "Thujone"],
                "mechanism": "Disrupts parasite cell membranes, crosses blood-brain barrier",
                "dosage": {"amount": "200-300mg", "frequency": "2x daily", "timing": "With meals"},
                "form": "capsule",
                "priority": "primary",
                "evidence_level": "WHO-approved antimalarial compound",
            },
            {
                "name": "Cloves",
                "latin_name": "Syzygium aromaticum",
                "active_compounds": ["Eugenol", "Caryophyllene"],
                "mechanism": "Kills parasite eggs and larvae stages",
                "dosage": {"amount": "500mg ground", "frequency": "3x daily", "timing": "With meals"},
                "form": "powder",
                "priority": "primary",
                "evidence_level": "Strong antimicrobial documentation",
            },
        ],
        "supporting_supplements": [
            {
                "name": "Digestive Enzymes",
                "purpose": "Break down biofilms, improve nutrient absorption",
                "dosage": "2-4 capsules with meals",
                "timing": "With each meal",
                "optional": False,
            },
            {
                "name": "Milk Thistle",
                "purpose": "Liver protection during detox",
                "dosage": "200-400mg standardized extract",
                "timing": "2x daily",
                "optional": False,
            },
            {
                "name": "Activated Charcoal",
                "purpose": "Bind toxins from parasite die-off",
                "dosage": "500-1000mg",
                "timing": "2 hours away from herbs/medications",
                "optional": True,
            },
        ],
        "dietary_guidelines": [
            {
                "category": "avoid",
                "foods": ["Refined sugar", "Processed foods", "Alcohol", "Dairy products", "High-glycemic fruits"],
                "reasoning": "These foods feed parasites and promote inflammation",
            },
            {
                "category": "include",
                "foods": ["Garlic", "Onions", "Pumpkin seeds", "Papaya seeds", "Coconut oil", "Fermented vegetables"],
                "reasoning": "Natural antiparasitic properties and gut health support",
            },
        ],
        "contraindications": [
            "Pregnancy and breastfeeding",
            "Seizure disorders (wormwood)",
            "Blood thinning medications (cloves)",
            "Tree nut allergies (black walnut)",
            "Severe liver disease",
        ],
        "side_effects": [
            "Herxheimer reaction (die-off symptoms)",
            "Digestive upset",
            "Headaches",
            "Fatigue",
            "Skin breakouts",
        ],
        "monitoring_requirements": [
            "Weekly symptom assessment",
            "Liver function monitoring if history of liver issues",
            "Hydration status",
            "Bowel movement quality and frequency",
        ],
        "evidence_level": "extensive_research",
        "success_rate": "70-85% symptom improvement in traditional use",
        "regional_availability": {
            "north_america": True,
            "europe": True,
            "asia": False,
            "latin_america": True,
            "africa": False,
        },
    },

    # ===== AYURVEDIC =====
    {
        "id": "ayurvedic_comprehensive",
        "name": "Ayurvedic Comprehensive Cleanse",
        "type": "ayurvedic",
        "description": "Traditional Ayurvedic approach using time-tested herbs for gentle yet effective parasite elimination",
        "target_parasites": ["intestinal_worms", "liver_parasites", "blood_parasites"],
        "target_ailments": ["digestive_disorders", "liver_congestion", "chronic_infections", "bloating"],
        "intensity": "gentle",
        "duration": {"min": 14, "max": 84, "recommended": 30},
        "phases": [
            {
                "name": "Ama Digestion (Toxin Clearing)",
                "duration": 14,
                "description": "Clear accumulated toxins and strengthen digestive fire",
                "objectives": ["Enhance digestion", "Clear ama (toxins)", "Balance doshas"],
                "key_actions": ["Triphala for elimination", "Digestive spices", "Simple diet"],
            },
            {
                "name": "Krimi Nashana (Parasite Destruction)",
                "duration": 21,
                "description": "Active antiparasitic phase using traditional Ayurvedic herbs",
                "objectives": ["Eliminate parasites", "Support liver function", "Maintain balance"],
                "key_actions": ["Primary antiparasitic herbs", "Liver support", "Constitutional balancing"],
            },
            {
                "name": "Rasayana (Rejuvenation)",
                "duration": 21,
                "description": "Rejuvenate tissues and restore optimal health",
                "objectives": ["Rebuild strength", "Enhance immunity", "Prevent reinfection"],
                "key_actions": ["Rejuvenative herbs", "Ojas building foods", "Lifestyle optimization"],
            },
        ],
        "herbs": [
            {
                "name": "Vidanga",
                "latin_name": "Embelia ribes",
                "active_compounds": ["Embelin", "Christembine"],
                "mechanism": "Primary Ayurvedic anthelmintic, carminative properties",
                "dosage": {"amount": "1-2g powder", "frequency": "2x daily", "timing": "Before meals"},
                "form": "powder",
                "priority": "primary",
                "evidence_level": "Classical texts + clinical studies",
            },
            {
                "name": "Neem",
                "latin_name": "Azadirachta indica",
                "active_compounds": ["Azadirachtin", "Nimbidin", "Quercetin"],
                "mechanism": "Broad spectrum antimicrobial, immune enhancement",
                "dosage": {"amount": "500mg leaf extract", "frequency": "2x daily", "timing": "With meals"},
                "form": "capsule",
                "priority": "primary",
                "evidence_level": "Extensive modern research",
            },
            {
                "name": "Kutki",
                "latin_name": "Picrorhiza kurroa",
                "active_compounds": ["Kutkoside", "Picroside"],
                "mechanism": "Hepatoprotective, liver detoxification, choleretic action",
                "dosage": {"amount": "250-500mg extract", "frequency": "2x daily", "timing": "After meals"},
                "form": "capsule",
                "priority": "primary",
                "evidence_level": "Liver protective effects documented",
            },
            {
                "name": "Kalmegh",
                "latin_name": "Andrographis paniculata",
                "active_compounds": ["Andrographolide"],
                "mechanism": "Antimicrobial, hepatoprotective, immune support",
                "dosage": {"amount": "400-800mg standardized", "frequency": "2x daily", "timing": "With meals"},
                "form": "capsule",
                "priority": "secondary",
                "evidence_level": "Extensive clinical research",
            },
        ],
        "supporting_supplements": [
            {
                "name": "Triphala",
                "purpose": "Digestive support, regularity, detoxification",
                "dosage": "1-2g powder or 500-1000mg extract",
                "timing": "Before bed or morning empty stomach",
                "optional": False,
            },
            {
                "name": "Ashwagandha",
                "purpose": "Stress adaptation, immune support during cleanse",
                "dosage": "300-500mg standardized extract",
                "timing": "2x daily with meals",
                "optional": True,
            },
        ],
        "dietary_guidelines": [
            {
                "category": "include",
                "foods": ["Kitchari", "Cooked vegetables", "Digestive spices", "Herbal teas", "Ghee (small amounts)"],
                "reasoning": "Easy to digest, supports agni (digestive fire), balances doshas",
            },
            {
                "category": "avoid",
                "foods": ["Raw foods", "Cold foods/drinks", "Heavy/oily foods", "Processed foods", "Excessive sweet/sour"],
                "reasoning": "These can weaken digestion and create ama (toxins)",
            },
        ],
        "contraindications": [
            "Pregnancy (especially neem)",
            "Autoimmune conditions (kalmegh)",
            "Hypoglycemia (kutki)",
            "Severe debility without supervision",
        ],
        "side_effects": [
            "Mild digestive upset initially",
            "Temporary fatigue as body adjusts",
            "Possible changes in bowel patterns",
        ],
        "monitoring_requirements": [
            "Constitutional assessment",
            "Digestive strength monitoring",
            "Energy and sleep patterns",
            "Tongue and pulse examination",
        ],
        "evidence_level": "traditional",
        "success_rate": "60-80% improvement in traditional practice",
        "regional_availability": {
            "north_america": True,
            "europe": True,
            "asia": True,
            "latin_america": False,
            "africa": False,
        },
    },

    # ===== MODERN =====
    {
        "id": "modern_integrative",
        "name": "Modern Integrative Protocol",
        "type": "modern",
        "description": "Science-based protocol using clinically researched compounds with proven antiparasitic activity",
        "target_parasites": ["giardia", "cryptosporidium", "blastocystis", "candida_overgrowth"],
        "target_ailments": ["ibs", "sibo", "chronic_diarrhea", "digestive_inflammation"],
        "intensity": "moderate",
        "duration": {"min": 14, "max": 28, "recommended": 21},
        "phases": [
            {
                "name": "Biofilm Disruption",
                "duration": 5,
                "description": "Break down protective biofilms harboring organisms",
                "objectives": ["Disrupt biofilms", "Enhance herb penetration", "Prepare for elimination"],
                "key_actions": ["Enzyme therapy", "NAC supplementation", "Lactoferrin"],
            },
            {
                "name": "Active Treatment",
                "duration": 14,
                "description": "Targeted antimicrobial therapy with research-backed compounds",
                "objectives": ["Eliminate pathogens", "Minimize resistance", "Support gut barrier"],
                "key_actions": ["Berberine complex", "Oregano oil", "Grapefruit seed extract"],
            },
            {
                "name": "Microbiome Restoration",
                "duration": 7,
                "description": "Rebuild healthy gut microbiome and barrier function",
                "objectives": ["Restore beneficial bacteria", "Heal gut lining", "Prevent recolonization"],
                "key_actions": ["Targeted probiotics", "Prebiotic fiber", "L-glutamine"],
            },
        ],
        "herbs": [
            {
                "name": "Berberine Complex",
                "latin_name": "Berberis vulgaris (and others)",
                "active_compounds": ["Berberine HCl", "Palmatine"],
                "mechanism": "Disrupts bacterial/parasitic cell walls, metabolic effects",
                "dosage": {"amount": "500mg", "frequency": "3x daily", "timing": "30 minutes before meals"},
                "form": "capsule",
                "priority": "primary",
                "evidence_level": "Extensive clinical trials",
            },
            {
                "name": "Oregano Oil",
                "latin_name": "Origanum vulgare",
                "active_compounds": ["Carvacrol", "Thymol"],
                "mechanism": "Broad spectrum antimicrobial, biofilm disruption",
                "dosage": {"amount": "150-300mg standardized", "frequency": "2x daily", "timing": "With meals"},
                "form": "capsule",
                "priority": "primary",
                "evidence_level": "Multiple antimicrobial studies",
            },
            {
                "name": "Grapefruit Seed Extract",
                "latin_name": "Citrus paradisi",
                "active_compounds": ["Naringin", "Limonene", "Citric acid"],
                "mechanism": "Membrane disruption, broad antimicrobial activity",
                "dosage": {"amount": "100-200mg", "frequency": "2-3x daily", "timing": "Between meals"},
                "form": "capsule",
                "priority": "secondary",
                "evidence_level": "Antimicrobial activity documented",
            },
        ],
        "supporting_supplements": [
            {
                "name": "N-Acetylcysteine (NAC)",
                "purpose": "Biofilm disruption, antioxidant support",
                "dosage": "600mg 2x daily",
                "timing": "Away from meals",
                "optional": False,
            },
            {
                "name": "Lactoferrin",
                "purpose": "Iron sequestration, antimicrobial support",
                "dosage": "200-400mg",
                "timing": "Empty stomach",
                "optional": True,
            },
            {
                "name": "Saccharomyces boulardii",
                "purpose": "Competitive exclusion, gut barrier support",
                "dosage": "5-10 billion CFU",
                "timing": "Away from antimicrobials",
                "optional": False,
            },
        ],
        "dietary_guidelines": [
            {
                "category": "avoid",
                "foods": ["Simple sugars", "Refined carbohydrates", "Alcohol", "High-iron foods during active phase"],
                "reasoning": "Reduces pathogen fuel sources and optimizes treatment",
            },
            {
                "category": "include",
                "foods": ["Low-glycemic vegetables", "Lean proteins", "Healthy fats", "Prebiotic fiber (after active phase)"],
                "reasoning": "Supports treatment efficacy and gut barrier function",
            },
        ],
        "contraindications": [
            "Pregnancy and breastfeeding",
            "Diabetes medications (berberine interactions)",
            "Blood thinning medications",
            "Severe immunocompromised states",
        ],
        "side_effects": [
            "GI upset (especially initial days)",
            "Possible blood sugar changes (berberine)",
            "Herxheimer-like reactions",
            "Temporary digestive changes",
        ],
        "monitoring_requirements": [
            "Blood glucose monitoring (if diabetic)",
            "Liver function (if history of issues)",
            "Symptom severity tracking",
            "Stool analysis pre/post treatment",
        ],
        "evidence_level": "clinical_studies",
        "success_rate": "75-90% in clinical studies for targeted pathogens",
        "regional_availability": {
            "north_america": True,
            "europe": True,
            "asia": True,
            "latin_america": True,
            "africa": True,
        },
    },

    # ===== COMBINATION =====
    {
        "id": "gentle_digestive_cleanse",
        "name": "Gentle Digestive Cleanse",
        "type": "combination",
        "description": "Mild approach suitable for sensitive individuals or those with existing digestive issues",
        "target_parasites": ["mild_overgrowths", "candida", "minor_parasites"],
        "target_ailments": ["bloating", "mild_ibs", "digestive_sensitivity"],
        "intensity": "gentle",
        "duration": {"min": 14, "max": 42, "recommended": 30},
        "phases": [
            {
                "name": "Gentle Preparation",
                "duration": 10,
                "description": "Very gradual preparation focusing on digestive support",
                "objectives": ["Strengthen digestion", "Reduce sensitivity", "Gentle detox support"],
                "key_actions": ["Digestive bitters", "Gentle fiber increase", "Stress reduction"],
            },
            {
                "name": "Mild Cleansing",
                "duration": 14,
                "description": "Gentle antiparasitic approach with minimal die-off reactions",
                "objectives": ["Gradual organism reduction", "Maintain comfort", "Support elimination"],
                "key_actions": ["Mild antiparasitic foods", "Supportive herbs", "Careful monitoring"],
            },
            {
                "name": "Digestive Strengthening",
                "duration": 16,
                "description": "Focus on rebuilding digestive strength and resilience",
                "objectives": ["Strengthen digestion", "Build tolerance", "Prevent recurrence"],
                "key_actions": ["Digestive support", "Probiotic building", "Stress management"],
            },
        ],
        "herbs": [
            {
                "name": "Garlic",
                "latin_name": "Allium sativum",
                "active_compounds": ["Allicin", "Ajoene"],
                "mechanism": "Gentle antimicrobial, immune support",
                "dosage": {"amount": "1-2 fresh cloves or 300mg extract", "frequency": "2x daily", "timing": "With meals"},
                "form": "fresh",
                "priority": "primary",
                "evidence_level": "Broad research on antimicrobial activity",
            },
            {
                "name": "Ginger",
                "latin_name": "Zingiber officinale",
                "active_compounds": ["Gingerol", "Shogaol"],
                "mechanism": "Digestive support, mild antimicrobial, anti-nausea",
                "dosage": {"amount": "500mg extract or 1g fresh", "frequency": "2-3x daily", "timing": "With meals"},
                "form": "fresh",
                "priority": "primary",
                "evidence_level": "Extensive digestive support research",
            },
            {
                "name": "Pumpkin Seeds",
                "latin_name": "Cucurbita pepo",
                "active_compounds": ["Cucurbitacin"],
                "mechanism": "Gentle antiparasitic, nutrient dense",
                "dosage": {"amount": "25-30g raw seeds", "frequency": "Daily", "timing": "As snack or with meals"},
                "form": "fresh",
                "priority": "secondary",
                "evidence_level": "Traditional use + clinical studies",
            },
        ],
        "supporting_supplements": [
            {
                "name": "Digestive Bitters",
                "purpose": "Stimulate digestive function, liver support",
                "dosage": "10-15 drops in water",
                "timing": "15 minutes before meals",
                "optional": False,
            },
            {
                "name": "Slippery Elm",
                "purpose": "Soothe digestive tract, protect gut lining",
                "dosage": "1-2 tsp powder in water",
                "timing": "Between meals",
                "optional": True,
            },
        ],
        "dietary_guidelines": [
            {
                "category": "include",
                "foods": ["Cooked vegetables", "Bone broth", "Herbal teas", "Easily digestible proteins", "Anti-parasitic spices"],
                "reasoning": "Gentle on digestion while providing natural antiparasitic compounds",
            },
            {
                "category": "avoid",
                "foods": ["Raw foods (initially)", "Cold foods", "Difficult-to-digest foods", "Excessive fiber initially"],
                "reasoning": "Prevents digestive stress during sensitive cleansing period",
            },
        ],
        "contraindications": [
            "Severe digestive disorders without supervision",
            "Blood thinning medications (garlic)",
            "Gallbladder disease (bitter herbs)",
        ],
        "side_effects": [
            "Minimal due to gentle approach",
            "Possible mild digestive changes",
            "Temporary garlic breath/odor",
        ],
        "monitoring_requirements": [
            "Daily comfort assessment",
            "Digestive function tracking",
            "Energy levels monitoring",
        ],
        "evidence_level": "traditional",
        "success_rate": "60-75% improvement with high tolerability",
        "regional_availability": {
            "north_america": True,
            "europe": True,
            "asia": True,
            "latin_america": True,
            "africa": True,
        },
    },
]


# ============================================================================
# AILMENT -> PROTOCOL MAPPING
# Drives recommendation scoring. Keys may name ailments absent from the
# ailment catalog ("skin_issues", "digestive_general"); values must be
# protocol ids above or they are skipped during scoring.
# ============================================================================

AILMENT_TO_PROTOCOL_MAPPING: Dict[str, List[str]] = {
    "ibs": ["modern_integrative", "gentle_digestive_cleanse"],
    "bloating": ["gentle_digestive_cleanse", "ayurvedic_comprehensive"],
    "chronic_fatigue": ["classic_triple_herb", "ayurvedic_comprehensive"],
    "brain_fog": ["classic_triple_herb", "modern_integrative"],
    "constipation": ["ayurvedic_comprehensive", "gentle_digestive_cleanse"],
    "acid_reflux": ["gentle_digestive_cleanse"],
    "liver_congestion": ["ayurvedic_comprehensive", "classic_triple_herb"],
    "frequent_infections": ["ayurvedic_comprehensive", "modern_integrative"],
    "skin_issues": ["classic_triple_herb", "ayurvedic_comprehensive"],
    "digestive_general": ["gentle_digestive_cleanse", "modern_integrative"],
}
