"""
Checks de la syntaxe des tokens genrés sans pluriel.

- Émetteur (:n) : le token porte le genre de ce qu'il désigne, une seule
  balise parmi celles de la langue.
  Ex: "Valve_Sword:n"  "#|f|#épée"
- Récepteur (:g) : le token s'accorde avec un émetteur, une forme par genre
  de la langue, la première balise en tête de valeur.
  Ex: "Valve_Broken:g"  "#|m|#cassé#|f|#cassée"
"""

from .base import CheckResult, ValidationContext
from .tags import GENDER_TAGS, format_tag_list


class GenderSenderCheck:
    """
    Vérifie qu'un token :n porte exactement une balise de genre valide.

    Toute balise hors du profil, ou toute balise présente plus d'une fois,
    est une erreur. Si la langue n'a pas de genre, aucune balise n'est admise.
    """

    @property
    def name(self) -> str:
        """Nom unique du check."""
        return "gender_sender"

    def validate(self, context: ValidationContext) -> CheckResult:
        genders = context.profile.gender_tags
        value = context.value
        matched: list[str] = []

        for tag in GENDER_TAGS:
            count = value.count(tag)
            if count == 0:
                continue

            if count > 1 or tag not in genders:
                if genders:
                    message = (
                        f"Error with gender form: {tag} - expected only one of: "
                        f"{format_tag_list(genders)}"
                    )
                else:
                    message = f"Error with gender form: {tag} - no gender expected"
                return CheckResult.issue(self.name, message, tag=tag, count=count)

            matched.append(tag)

        if genders and len(matched) != 1:
            return CheckResult.issue(
                self.name,
                f"Error with gender form - expected one of: {format_tag_list(genders)}",
                matched=matched,
            )

        return CheckResult.ok(self.name)


class GenderReceiverCheck:
    """
    Vérifie qu'un token :g porte chaque balise de genre du profil exactement une fois.

    Aucune balise hors profil n'est admise. Quand la langue a plusieurs genres,
    la première balise doit se trouver à la position 0 de la valeur.
    """

    @property
    def name(self) -> str:
        """Nom unique du check."""
        return "gender_receiver"

    def validate(self, context: ValidationContext) -> CheckResult:
        genders = context.profile.gender_tags
        value = context.value
        first_position: int | None = None

        for tag in GENDER_TAGS:
            count = value.count(tag)
            expected = 1 if tag in genders else 0

            if count != expected:
                if genders:
                    message = (
                        f"Error with gender form: {tag} - expected one of each: "
                        f"{format_tag_list(genders)}"
                    )
                else:
                    message = f"Error with gender form: {tag} - no gender expected"
                return CheckResult.issue(
                    self.name, message, tag=tag, count=count, expected=expected
                )

            if count:
                position = value.index(tag)
                if first_position is None or position < first_position:
                    first_position = position

        if len(genders) > 1 and first_position:
            return CheckResult.issue(
                self.name,
                "Error with gender form - the first gender tag should be at the "
                f"beginning of the string. Found at position {first_position}",
                position=first_position,
            )

        return CheckResult.ok(self.name)
