"""
Checks de la syntaxe des tokens genrés avec pluriel (:np et :gp).

- Émetteur pluriel (:np) : une balise de genre par forme plurielle.
  Ex: "Valve_TestPluralGenders_Noun1:np"  "#|m|#Trésor#|m|#Trésors"
- Récepteur pluriel (:gp) : la liste complète des genres répétée pour chaque
  forme plurielle, groupe après groupe.
  Ex: "Valve_TestPluralGenders_Adjective1:gp"
      "#|m|#peu Commun#|f|#peu Commune#|m|#peu Communs#|f|#peu Communes"

Pour une langue sans genre mais avec pluriel (ex: schinese), les formes sont
séparées par la balise de pluriel #|# comme pour un token :p.
"""

from dataclasses import dataclass

from .base import CheckResult, ValidationContext
from .plural_check import count_separators, expected_separator_count
from .tags import GENDER_TAGS, format_tag_list


@dataclass(frozen=True)
class TagOccurrence:
    """
    Occurrence d'une balise de genre dans une valeur :gp.

    Attributes:
        plural_group: Index du groupe pluriel (à partir de 1)
        gender_tag: Balise de genre
        position: Position de la balise dans la valeur
    """

    plural_group: int
    gender_tag: str
    position: int


def find_all(value: str, tag: str) -> list[int]:
    """Positions des occurrences (sans chevauchement) de tag dans value."""
    positions = []
    start = value.find(tag)
    while start != -1:
        positions.append(start)
        start = value.find(tag, start + len(tag))
    return positions


def _plural_fallback(check_name: str, context: ValidationContext) -> CheckResult:
    # Langue sans genre : les formes sont séparées par #|#
    expected = expected_separator_count(context.profile.plural_form_count)
    found = count_separators(context.value)

    if found == expected:
        return CheckResult.ok(check_name)

    return CheckResult.issue(
        check_name,
        f"Error with gender/plural form: found {found + 1} plural forms, "
        f"while expecting {expected + 1} separated with a plural tag",
        expected_forms=expected + 1,
        actual_forms=found + 1,
    )


class GenderSenderPluralCheck:
    """
    Vérifie qu'un token :np porte autant de balises de genre valides que de formes plurielles.

    Les balises peuvent différer d'une forme à l'autre ; seul leur nombre total
    est contrôlé.
    """

    @property
    def name(self) -> str:
        """Nom unique du check."""
        return "gender_sender_plural"

    def validate(self, context: ValidationContext) -> CheckResult:
        genders = context.profile.gender_tags
        if not genders:
            return _plural_fallback(self.name, context)

        expected = context.profile.plural_form_count
        value = context.value
        total = 0

        for tag in GENDER_TAGS:
            count = value.count(tag)
            if count and tag not in genders:
                return CheckResult.issue(
                    self.name,
                    f"Error with gender/plural form: this tag was unexpected {tag}",
                    tag=tag,
                )
            total += count

        if total != expected:
            return CheckResult.issue(
                self.name,
                f"Error with gender/plural forms - counted {total} while expecting {expected}",
                expected_forms=expected,
                actual_forms=total,
            )

        return CheckResult.ok(self.name)


class GenderReceiverPluralCheck:
    """
    Vérifie qu'un token :gp contient N groupes complets de balises de genre.

    Deux étapes, arrêt à la première erreur :
    1. Comptage : chaque genre du profil apparaît exactement N fois, aucun
       genre hors profil n'apparaît.
    2. Ordre : la p-ième occurrence de chaque genre appartient au groupe p ;
       aucune balise du groupe p ne précède la dernière balise du groupe p-1.
       L'ordre des genres à l'intérieur d'un groupe est libre.
    """

    @property
    def name(self) -> str:
        """Nom unique du check."""
        return "gender_receiver_plural"

    def validate(self, context: ValidationContext) -> CheckResult:
        genders = context.profile.gender_tags
        if not genders:
            return _plural_fallback(self.name, context)

        expected = context.profile.plural_form_count
        value = context.value

        # 1 - Comptage
        for tag in GENDER_TAGS:
            count = value.count(tag)
            if tag not in genders:
                if count:
                    return CheckResult.issue(
                        self.name,
                        f"Error with gender/plural form: {tag} - unexpected tag, "
                        f"expected groups of: {format_tag_list(genders)}",
                        tag=tag,
                        count=count,
                    )
                continue

            if count != expected:
                return CheckResult.issue(
                    self.name,
                    f"Error with gender/plural form: {tag} - found {count} while expecting "
                    f"{expected} of each gender group: {format_tag_list(genders)}",
                    tag=tag,
                    count=count,
                    expected=expected,
                )

        # 2 - Ordre des groupes
        positions = {tag: find_all(value, tag) for tag in genders}
        previous_max = 0

        for group in range(1, expected + 1):
            group_max = 0
            for tag in genders:
                occurrence = TagOccurrence(group, tag, positions[tag][group - 1])
                if occurrence.position < previous_max:
                    return CheckResult.issue(
                        self.name,
                        "Error with gender/plural form: incorrect order plural form: "
                        f"{occurrence.plural_group}, gender tag: {occurrence.gender_tag}",
                        plural_group=occurrence.plural_group,
                        tag=occurrence.gender_tag,
                        position=occurrence.position,
                    )
                group_max = max(group_max, occurrence.position)
            previous_max = group_max

        return CheckResult.ok(self.name)
