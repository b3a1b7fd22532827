"""JSONata expressions, one per imperative transform in ``imperative.py``.

A ``[]`` step keeps the result an array when exactly one item matches.
"""

from __future__ import annotations

SIMPLE_MAPPING = "laureates.knownName.en[]"

COMPLEX_MAPPING = """
laureates[].{
  "name": knownName.en ? knownName.en : orgName.en,
  "gender": gender,
  "prizes": nobelPrizes.categoryFullName.en[]
}
"""

COMPLEX_MAPPING_WITH_SORT = """
laureates[].{
  "name": knownName.en ? knownName.en : orgName.en,
  "gender": gender,
  "prizes": nobelPrizes.categoryFullName.en[]
}^(name)
"""

# Evaluated against {"laureates": <laureates fixture>, "prizes": <prizes fixture>}.
# Each prize yields the list of its laureates; $reduce flattens those lists
# into one, in prize order.
COMPLEX_JOIN = """
$reduce(
  prizes.nobelPrizes.(
    $p := $;
    $$.laureates.laureates[id in $p.laureates.id].{
      "name": knownName.en,
      "gender": gender,
      "prize": $p.categoryFullName.en
    }
  ),
  function($acc, $v) { $append($acc, $v) },
  []
)
"""

AGGREGATES = """(
$sp := nobelPrizes.{"count": $count(laureates)}.count;

{
  "count": $count($sp),
  "sum": $sum($sp),
  "average": $average($sp),
  "min": $min($sp),
  "max": $max($sp)
};
)"""
