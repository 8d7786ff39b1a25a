class BaseSchema:
    """Checks that the top-level keys a route needs are present and non-empty.

    Each required field is a tuple of accepted spellings; the first one is
    the name reported when none of them is set.
    """
    required_fields = []

    def value(self, data, names):
        for name in names:
            if data.get(name) not in (None, ""):
                return data[name]
        return None

    def validate(self, data):
        missing = [names[0] for names in self.required_fields if self.value(data, names) is None]
        return {"valid": len(missing) == 0, "missing": missing}


class DiscountRecordSchema(BaseSchema):
    USER_ID = ("userId", "user_id")
    PLAN_ID = ("planId", "plan_id")
    required_fields = [USER_ID, PLAN_ID]
