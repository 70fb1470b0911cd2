"""
Static equipment and exercise catalog.

Single source of truth for which exercises a piece of equipment enables.
Built once into an immutable ExerciseCatalog and shared by reference.
"""

from collections import namedtuple


# ---------------------------------------------------------------------------
# Muscle categories and labels
# ---------------------------------------------------------------------------
CANONICAL_GROUP_ORDER = ("chest", "shoulder", "back", "legs", "arms", "core")

EQUIPMENT_TYPES = ("machine", "barbell", "dumbbell")

MUSCLE_GROUP_LABELS = {
    "chest": "Chest",
    "shoulder": "Shoulders",
    "back": "Back",
    "legs": "Legs",
    "arms": "Arms",
    "arms-bicep": "Biceps",
    "arms-tricep": "Triceps",
    "core": "Core",
}

CUSTOM_PREFIX = "custom-"

# ---------------------------------------------------------------------------
# Catalog data: category -> [(equipment id, display name, type, exercises)]
# Each exercise is (name, muscle group, is_compound).
# ---------------------------------------------------------------------------
EQUIPMENT_CATALOG = {
    "chest": [
        ("chest-press", "Chest Press Machine", "machine", [("Machine Chest Press", "chest", True)]),
        ("pec-deck", "Pec Deck", "machine", [("Pec Deck Fly", "chest", False)]),
        ("dip-machine", "Dip Machine", "machine", [("Machine Dip", "chest", True)]),
        ("cable-fly", "Cable Crossover", "machine", [("Cable Fly", "chest", False)]),
        ("bench-press", "Flat Bench", "barbell", [("Barbell Bench Press", "chest", True)]),
        ("incline-bench", "Incline Bench", "barbell", [("Incline Barbell Bench Press", "chest", True)]),
        ("decline-bench", "Decline Bench", "barbell", [("Decline Barbell Bench Press", "chest", True)]),
        ("db-bench-press", "Dumbbell Bench", "dumbbell", [("Dumbbell Bench Press", "chest", True)]),
        ("db-incline-press", "Dumbbell Incline Bench", "dumbbell", [("Incline Dumbbell Press", "chest", True)]),
        ("db-fly", "Dumbbells (Fly)", "dumbbell", [("Dumbbell Fly", "chest", False)]),
        ("db-pullover", "Dumbbells (Pullover)", "dumbbell", [("Dumbbell Pullover", "chest", False)]),
    ],
    "shoulder": [
        ("shoulder-press", "Shoulder Press Machine", "machine", [("Machine Shoulder Press", "shoulder", True)]),
        ("lateral-raise-machine", "Lateral Raise Machine", "machine", [("Machine Lateral Raise", "shoulder", False)]),
        ("cable-lateral", "Cable Station (Lateral)", "machine", [("Cable Lateral Raise", "shoulder", False)]),
        ("face-pull", "Cable Station (Face Pull)", "machine", [("Face Pull", "shoulder", False)]),
        ("bb-shoulder-press", "Barbell (Overhead)", "barbell", [("Barbell Overhead Press", "shoulder", True)]),
        ("bb-upright-row", "Barbell (Upright Row)", "barbell", [("Barbell Upright Row", "shoulder", True)]),
        ("bb-front-raise", "Barbell (Front Raise)", "barbell", [("Barbell Front Raise", "shoulder", False)]),
        ("db-shoulder-press", "Dumbbells (Shoulder Press)", "dumbbell", [("Dumbbell Shoulder Press", "shoulder", True)]),
        ("db-lateral-raise", "Dumbbells (Lateral Raise)", "dumbbell", [("Dumbbell Lateral Raise", "shoulder", False)]),
        ("db-rear-delt-fly", "Dumbbells (Rear Delt)", "dumbbell", [("Dumbbell Rear Delt Fly", "shoulder", False)]),
        ("db-front-raise", "Dumbbells (Front Raise)", "dumbbell", [("Dumbbell Front Raise", "shoulder", False)]),
    ],
    "back": [
        ("lat-pulldown", "Lat Pulldown Machine", "machine", [("Lat Pulldown", "back", True)]),
        ("seated-row", "Seated Row Machine", "machine", [("Seated Row", "back", True)]),
        ("cable-row", "Cable Row Station", "machine", [("Cable Row", "back", True)]),
        ("back-extension", "Back Extension Bench", "machine", [("Back Extension", "back", False)]),
        ("bb-bent-over-row", "Barbell (Row)", "barbell", [("Barbell Bent-Over Row", "back", True)]),
        ("bb-deadlift", "Barbell (Deadlift)", "barbell", [("Barbell Deadlift", "back", True)]),
        ("t-bar-row", "T-Bar Row", "barbell", [("T-Bar Row", "back", True)]),
        ("db-row", "Dumbbells (Row)", "dumbbell", [("One-Arm Dumbbell Row", "back", True)]),
        ("db-pullover-back", "Dumbbells (Pullover)", "dumbbell", [("Dumbbell Pullover", "back", False)]),
        ("db-shrug", "Dumbbells (Shrug)", "dumbbell", [("Dumbbell Shrug", "back", False)]),
        ("pull-up-bar", "Pull-Up Bar", None, [("Pull-Up", "back", True)]),
    ],
    "legs": [
        ("leg-press", "Leg Press", "machine", [("Leg Press", "legs", True)]),
        ("leg-extension", "Leg Extension", "machine", [("Leg Extension", "legs", False)]),
        ("leg-curl", "Leg Curl", "machine", [("Lying Leg Curl", "legs", False)]),
        ("hack-squat", "Hack Squat", "machine", [("Hack Squat", "legs", True)]),
        ("calf-raise", "Calf Raise Machine", "machine", [("Standing Calf Raise", "legs", False)]),
        ("squat-rack", "Squat Rack", "barbell", [("Barbell Back Squat", "legs", True)]),
        ("bb-romanian-deadlift", "Barbell (RDL)", "barbell", [("Barbell Romanian Deadlift", "legs", True)]),
        ("bb-lunge", "Barbell (Lunge)", "barbell", [("Barbell Lunge", "legs", True)]),
        ("db-squat", "Dumbbells (Squat)", "dumbbell", [("Dumbbell Goblet Squat", "legs", True)]),
        ("db-lunge", "Dumbbells (Lunge)", "dumbbell", [("Dumbbell Walking Lunge", "legs", True)]),
        ("db-romanian-deadlift", "Dumbbells (RDL)", "dumbbell", [("Dumbbell Romanian Deadlift", "legs", True)]),
        ("hip-thrust", "Hip Thrust Bench", "dumbbell", [("Hip Thrust", "legs", True)]),
    ],
    "arms": [
        ("bicep-curl-machine", "Biceps Curl Machine", "machine", [("Machine Biceps Curl", "arms-bicep", False)]),
        ("tricep-pushdown", "Cable Station (Pushdown)", "machine", [("Triceps Pushdown", "arms-tricep", False)]),
        ("cable-curl", "Cable Station (Curl)", "machine", [("Cable Curl", "arms-bicep", False)]),
        ("bb-bicep-curl", "Barbell (Curl)", "barbell", [("Barbell Curl", "arms-bicep", False)]),
        ("ez-bar", "EZ-Bar", "barbell", [("EZ-Bar Curl", "arms-bicep", False)]),
        ("bb-tricep-extension", "Barbell (Triceps)", "barbell", [("Barbell Lying Triceps Extension", "arms-tricep", False)]),
        ("db-bicep-curl", "Dumbbells (Curl)", "dumbbell", [("Dumbbell Biceps Curl", "arms-bicep", False)]),
        ("db-tricep-extension", "Dumbbells (Triceps)", "dumbbell", [("Dumbbell Overhead Triceps Extension", "arms-tricep", False)]),
        ("preacher-curl", "Preacher Bench", "dumbbell", [("Preacher Curl", "arms-bicep", False)]),
    ],
    "core": [
        ("ab-crunch", "Ab Crunch Machine", "machine", [("Machine Crunch", "core", False)]),
        ("cable-crunch", "Cable Station (Crunch)", "machine", [("Kneeling Cable Crunch", "core", False)]),
        ("roman-chair", "Roman Chair", None, [("Roman Chair Back Extension", "core", False)]),
        ("ab-roller", "Ab Wheel", None, [("Ab Wheel Rollout", "core", False)]),
        ("hanging-leg-raise", "Captain's Chair", None, [("Hanging Leg Raise", "core", False)]),
    ],
}


EquipmentItem = namedtuple("EquipmentItem", "id name category equipment_type exercises")
ExerciseTemplate = namedtuple("ExerciseTemplate", "name equipment_id muscle_group is_compound")

# Equipment references, decoded once from raw UI ids.
CatalogEquipment = namedtuple("CatalogEquipment", "equipment_id")
CustomEquipment = namedtuple("CustomEquipment", "category equipment_type name")


def category_of(muscle_group):
    """Roll a muscle group up to its category ("arms-bicep" -> "arms")."""
    if not muscle_group:
        return ""
    return muscle_group.split("-", 1)[0]


def muscle_group_label(key):
    return MUSCLE_GROUP_LABELS.get(key, (key or "").replace("-", " ").title())


def order_groups(groups):
    """Return groups in canonical order, dropping duplicates and unknown keys."""
    wanted = set(groups or [])
    return [group for group in CANONICAL_GROUP_ORDER if group in wanted]


def parse_custom_equipment_id(raw_id):
    """
    Decode a "custom-<category>-[<type>-]<name>" identifier.

    The type segment is only recognised when it is one of the known equipment
    types and a non-empty name follows it. Returns None when the id is not a
    well-formed custom id.
    """
    if not raw_id or not raw_id.startswith(CUSTOM_PREFIX):
        return None

    payload = raw_id[len(CUSTOM_PREFIX):]
    category, sep, rest = payload.partition("-")
    if not sep or category not in CANONICAL_GROUP_ORDER:
        return None

    equipment_type = None
    head, sep, tail = rest.partition("-")
    if sep and head in EQUIPMENT_TYPES and tail.strip():
        equipment_type = head
        rest = tail

    name = rest.strip()
    if not name:
        return None
    return CustomEquipment(category=category, equipment_type=equipment_type, name=name)


def custom_equipment_id(ref):
    """Re-encode a CustomEquipment reference as its raw identifier."""
    parts = [ref.category]
    if ref.equipment_type:
        parts.append(ref.equipment_type)
    parts.append(ref.name)
    return CUSTOM_PREFIX + "-".join(parts)


class ExerciseCatalog:
    """
    Read-only lookup over equipment items and the exercises they enable.

    Usage:
        catalog = get_catalog()
        catalog.resolve_equipment_name("leg-press")  # -> "Leg Press"
        catalog.exercises_for("arms", equipment_type="dumbbell")
    """

    def __init__(self, catalog_data=None):
        data = EQUIPMENT_CATALOG if catalog_data is None else catalog_data
        items = []
        templates = []
        for category in CANONICAL_GROUP_ORDER:
            for equipment_id, name, equipment_type, exercises in data.get(category, []):
                item_templates = tuple(
                    ExerciseTemplate(
                        name=exercise_name,
                        equipment_id=equipment_id,
                        muscle_group=muscle_group,
                        is_compound=bool(is_compound),
                    )
                    for exercise_name, muscle_group, is_compound in exercises
                )
                items.append(
                    EquipmentItem(
                        id=equipment_id,
                        name=name,
                        category=category,
                        equipment_type=equipment_type,
                        exercises=item_templates,
                    )
                )
                templates.extend(item_templates)

        self._items = tuple(items)
        self._templates = tuple(templates)
        self._items_by_id = {item.id: item for item in self._items}

    @property
    def items(self):
        return self._items

    @property
    def templates(self):
        return self._templates

    def get_item(self, equipment_id):
        return self._items_by_id.get(equipment_id)

    def decode(self, raw_id):
        """Decode a raw UI id into CatalogEquipment, CustomEquipment, or None."""
        raw_id = (raw_id or "").strip()
        if not raw_id:
            return None
        if raw_id.startswith(CUSTOM_PREFIX):
            return parse_custom_equipment_id(raw_id)
        if raw_id in self._items_by_id:
            return CatalogEquipment(equipment_id=raw_id)
        return None

    def decode_all(self, raw_ids):
        """Decode ids once, dropping unresolvable ones and duplicates (first wins)."""
        refs = []
        seen = set()
        for raw_id in raw_ids or []:
            ref = self.decode(raw_id)
            if ref is None or ref in seen:
                continue
            seen.add(ref)
            refs.append(ref)
        return refs

    def resolve_equipment_name(self, raw_id):
        """Return the display name for a raw id, or None when it is not known."""
        ref = self.decode(raw_id)
        if ref is None:
            return None
        return self.reference_name(ref)

    def reference_name(self, ref):
        if isinstance(ref, CustomEquipment):
            return ref.name
        item = self._items_by_id.get(ref.equipment_id)
        return item.name if item else None

    def reference_category(self, ref):
        if isinstance(ref, CustomEquipment):
            return ref.category
        item = self._items_by_id.get(ref.equipment_id)
        return item.category if item else None

    def exercises_for(self, muscle_group, equipment_type=None):
        """
        All catalog exercises for a muscle group, optionally by equipment type.

        Asking for a category ("arms") includes its variants ("arms-bicep").
        """
        results = []
        for item in self._items:
            if equipment_type and item.equipment_type != equipment_type:
                continue
            for template in item.exercises:
                if template.muscle_group == muscle_group or category_of(template.muscle_group) == muscle_group:
                    results.append(template)
        return results

    def available_categories(self, refs):
        """Categories with at least one selected equipment item, canonical order."""
        categories = set()
        for ref in refs or []:
            category = self.reference_category(ref)
            if category:
                categories.add(category)
        return order_groups(categories)

    def templates_for_equipment(self, refs, categories):
        """
        Exercise templates enabled by the selected equipment within categories.

        Catalog templates come first in catalog order, so the result does not
        depend on selection order. Each custom item contributes one isolation
        template named after the item.
        """
        wanted = set(categories or [])
        selected_ids = {ref.equipment_id for ref in refs or [] if isinstance(ref, CatalogEquipment)}

        results = [
            template
            for template in self._templates
            if template.equipment_id in selected_ids and category_of(template.muscle_group) in wanted
        ]

        customs = [ref for ref in refs or [] if isinstance(ref, CustomEquipment) and ref.category in wanted]
        customs.sort(key=lambda ref: (CANONICAL_GROUP_ORDER.index(ref.category), ref.name, ref.equipment_type or ""))
        for ref in customs:
            results.append(
                ExerciseTemplate(
                    name=ref.name,
                    equipment_id=custom_equipment_id(ref),
                    muscle_group=ref.category,
                    is_compound=False,
                )
            )
        return results


# ---------------------------------------------------------------------------
# Module-level shared catalog
# ---------------------------------------------------------------------------
_default_catalog = None


def get_catalog():
    """Get or create the shared catalog."""
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = ExerciseCatalog()
    return _default_catalog


def reset_catalog():
    """Reset the shared catalog (useful for testing)."""
    global _default_catalog
    _default_catalog = None


def resolve_equipment_name(raw_id):
    return get_catalog().resolve_equipment_name(raw_id)


def exercises_for(muscle_group, equipment_type=None):
    return get_catalog().exercises_for(muscle_group, equipment_type=equipment_type)
