"""
MedInfer — Static knowledge tables

Built-in symptom catalog and disease knowledge base. Declaration order of
DISEASES is significant: the rule scorer breaks probability ties by it.
"""

SYMPTOMS = [
    # id, name, category, severity
    ("fever", "Fever", "general", "moderate"),
    ("chills", "Chills", "general", "mild"),
    ("fatigue", "Fatigue", "general", "mild"),
    ("sweating", "Sweating", "general", "mild"),
    ("weight_loss", "Weight Loss", "general", "moderate"),
    ("excessive_thirst", "Excessive Thirst", "general", "mild"),
    ("excessive_hunger", "Excessive Hunger", "general", "mild"),
    ("frequent_urination", "Frequent Urination", "general", "mild"),
    ("painful_urination", "Painful Urination", "general", "moderate"),
    ("blood_urine", "Blood in Urine", "general", "severe"),
    ("wounds_heal_slowly", "Wounds Heal Slowly", "general", "mild"),
    ("cold_hands_feet", "Cold Hands and Feet", "general", "mild"),
    ("loss_appetite", "Loss of Appetite", "general", "mild"),

    ("runny_nose", "Runny Nose", "respiratory", "mild"),
    ("stuffy_nose", "Stuffy Nose", "respiratory", "mild"),
    ("sneezing", "Sneezing", "respiratory", "mild"),
    ("sore_throat", "Sore Throat", "respiratory", "mild"),
    ("cough", "Cough", "respiratory", "mild"),
    ("shortness_breath", "Shortness of Breath", "respiratory", "severe"),
    ("wheezing", "Wheezing", "respiratory", "moderate"),
    ("coughing_blood", "Coughing Blood", "respiratory", "severe"),

    ("nausea", "Nausea", "digestive", "mild"),
    ("vomiting", "Vomiting", "digestive", "moderate"),
    ("diarrhea", "Diarrhea", "digestive", "moderate"),
    ("abdominal_pain", "Abdominal Pain", "digestive", "moderate"),
    ("stomach_cramps", "Stomach Cramps", "digestive", "moderate"),

    ("headache", "Headache", "neurological", "mild"),
    ("severe_headache", "Severe Headache", "neurological", "severe"),
    ("dizziness", "Dizziness", "neurological", "moderate"),
    ("confusion", "Confusion", "neurological", "severe"),
    ("numbness", "Numbness", "neurological", "moderate"),
    ("blurred_vision", "Blurred Vision", "neurological", "moderate"),
    ("difficulty_speaking", "Difficulty Speaking", "neurological", "severe"),
    ("tremors", "Tremors", "neurological", "moderate"),
    ("seizures", "Seizures", "neurological", "severe"),

    ("chest_pain", "Chest Pain", "cardiovascular", "severe"),
    ("rapid_heartbeat", "Rapid Heartbeat", "cardiovascular", "moderate"),
    ("high_blood_pressure", "High Blood Pressure", "cardiovascular", "moderate"),
    ("jaw_pain", "Jaw Pain", "cardiovascular", "moderate"),

    ("muscle_pain", "Muscle Pain", "musculoskeletal", "mild"),
    ("back_pain", "Back Pain", "musculoskeletal", "moderate"),
    ("joint_pain", "Joint Pain", "musculoskeletal", "moderate"),
    ("stiffness", "Stiffness", "musculoskeletal", "mild"),
    ("swollen_joints", "Swollen Joints", "musculoskeletal", "moderate"),

    ("rash", "Rash", "dermatological", "mild"),
    ("itching", "Itching", "dermatological", "mild"),

    ("anxiety", "Anxiety", "psychological", "moderate"),
    ("depression", "Depression", "psychological", "moderate"),
    ("sleep_problems", "Sleep Problems", "psychological", "mild"),
    ("concentration_problems", "Concentration Problems", "psychological", "mild"),
    ("irritability", "Irritability", "psychological", "mild"),
]


DISEASES = [
    {
        "id": "common_cold",
        "name": "Common Cold",
        "description": "A viral infection of the upper respiratory tract.",
        "common_symptoms": ["runny_nose", "stuffy_nose", "sneezing", "sore_throat", "cough", "fatigue"],
        "rare_symptoms": ["fever", "headache"],
        "urgency": "low",
        "specialist_type": "General Practitioner",
    },
    {
        "id": "influenza",
        "name": "Influenza (Flu)",
        "description": "A viral infection that attacks the respiratory system.",
        "common_symptoms": ["fever", "chills", "muscle_pain", "fatigue", "cough", "headache"],
        "rare_symptoms": ["nausea", "vomiting", "diarrhea"],
        "urgency": "medium",
        "specialist_type": "General Practitioner",
    },
    {
        "id": "pneumonia",
        "name": "Pneumonia",
        "description": "An infection that inflames air sacs in one or both lungs.",
        "common_symptoms": ["fever", "chills", "cough", "shortness_breath", "chest_pain", "fatigue"],
        "rare_symptoms": ["confusion", "nausea", "vomiting"],
        "urgency": "high",
        "specialist_type": "Pulmonologist",
    },
    {
        "id": "bronchitis",
        "name": "Bronchitis",
        "description": "Inflammation of the lining of bronchial tubes.",
        "common_symptoms": ["cough", "fatigue", "shortness_breath", "chest_pain"],
        "rare_symptoms": ["fever", "chills"],
        "urgency": "medium",
        "specialist_type": "Pulmonologist",
    },
    {
        "id": "asthma",
        "name": "Asthma",
        "description": "A condition in which airways narrow and swell and may produce extra mucus.",
        "common_symptoms": ["shortness_breath", "chest_pain", "wheezing", "cough"],
        "rare_symptoms": ["anxiety", "fatigue"],
        "urgency": "medium",
        "specialist_type": "Pulmonologist",
    },
    {
        "id": "heart_attack",
        "name": "Heart Attack",
        "description": "Occurs when blood flow to part of the heart is blocked.",
        "common_symptoms": ["chest_pain", "shortness_breath", "nausea", "cold_hands_feet"],
        "rare_symptoms": ["back_pain", "jaw_pain", "dizziness"],
        "urgency": "emergency",
        "specialist_type": "Cardiologist",
    },
    {
        "id": "hypertension",
        "name": "Hypertension",
        "description": "High blood pressure, often called the silent killer.",
        "common_symptoms": ["high_blood_pressure", "headache"],
        "rare_symptoms": ["dizziness", "blurred_vision", "shortness_breath"],
        "urgency": "medium",
        "specialist_type": "Cardiologist",
    },
    {
        "id": "diabetes_type2",
        "name": "Type 2 Diabetes",
        "description": "A chronic condition affecting the way the body processes blood sugar.",
        "common_symptoms": ["excessive_thirst", "frequent_urination", "excessive_hunger", "fatigue"],
        "rare_symptoms": ["blurred_vision", "wounds_heal_slowly", "weight_loss"],
        "urgency": "medium",
        "specialist_type": "Endocrinologist",
    },
    {
        "id": "gastroenteritis",
        "name": "Gastroenteritis",
        "description": "Inflammation of the stomach and intestines, typically from infection.",
        "common_symptoms": ["nausea", "vomiting", "diarrhea", "abdominal_pain", "stomach_cramps"],
        "rare_symptoms": ["fever", "headache", "fatigue"],
        "urgency": "medium",
        "specialist_type": "Gastroenterologist",
    },
    {
        "id": "migraine",
        "name": "Migraine",
        "description": "A severe recurring headache often accompanied by other symptoms.",
        "common_symptoms": ["headache", "nausea", "blurred_vision"],
        "rare_symptoms": ["vomiting", "dizziness", "numbness"],
        "urgency": "medium",
        "specialist_type": "Neurologist",
    },
    {
        "id": "depression",
        "name": "Depression",
        "description": "A mental health disorder characterized by persistent sadness.",
        "common_symptoms": ["depression", "fatigue", "sleep_problems", "loss_appetite"],
        "rare_symptoms": ["concentration_problems", "weight_loss", "irritability"],
        "urgency": "medium",
        "specialist_type": "Psychiatrist",
    },
    {
        "id": "anxiety_disorder",
        "name": "Anxiety Disorder",
        "description": "A mental health disorder characterized by excessive worry or fear.",
        "common_symptoms": ["anxiety", "rapid_heartbeat", "sweating", "tremors"],
        "rare_symptoms": ["shortness_breath", "dizziness", "nausea"],
        "urgency": "medium",
        "specialist_type": "Psychiatrist",
    },
    {
        "id": "arthritis",
        "name": "Arthritis",
        "description": "Inflammation of one or more joints, causing pain and stiffness.",
        "common_symptoms": ["joint_pain", "stiffness", "swollen_joints"],
        "rare_symptoms": ["fatigue", "fever", "weight_loss"],
        "urgency": "low",
        "specialist_type": "Rheumatologist",
    },
    {
        "id": "allergic_reaction",
        "name": "Allergic Reaction",
        "description": "An immune system response to a substance that is usually harmless.",
        "common_symptoms": ["rash", "itching", "sneezing", "runny_nose"],
        "rare_symptoms": ["shortness_breath", "swollen_joints", "nausea"],
        "urgency": "medium",
        "specialist_type": "Allergist",
    },
    {
        "id": "kidney_stones",
        "name": "Kidney Stones",
        "description": "Hard deposits of minerals and salts that form inside kidneys.",
        "common_symptoms": ["abdominal_pain", "painful_urination", "blood_urine"],
        "rare_symptoms": ["nausea", "vomiting", "fever"],
        "urgency": "high",
        "specialist_type": "Urologist",
    },
    {
        "id": "stroke",
        "name": "Stroke",
        "description": "Occurs when blood supply to part of the brain is interrupted.",
        "common_symptoms": ["confusion", "numbness", "blurred_vision", "headache"],
        "rare_symptoms": ["dizziness", "difficulty_speaking"],
        "urgency": "emergency",
        "specialist_type": "Neurologist",
    },
]
