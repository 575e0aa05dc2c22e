"""
Tests for the per-operation contracts and the operation registry.
"""
from app.models.worksheet import Operation, WorksheetConfig
from app.skills.registry import OPERATION_REGISTRY, contract_for, operator_symbol
from app.skills.skill_metadata import label_for_operation


def _config(**overrides) -> WorksheetConfig:
    defaults = dict(
        grade="3", term=1, topic="number", operations=["addition"],
        min_operand=0, max_operand=99, operands_per_question=2,
        format="horizontal", question_count=10,
        allow_carrying=True, allow_borrowing=True,
        include_word_problems=False, difficulty_mode="fixed", seed="contracts",
    )
    defaults.update(overrides)
    return WorksheetConfig(**defaults)


class TestRegistry:
    def test_covers_every_operation(self):
        assert set(OPERATION_REGISTRY) == set(Operation)

    def test_contract_operation_matches_key(self):
        for operation, contract in OPERATION_REGISTRY.items():
            assert contract.operation == operation

    def test_symbols(self):
        assert operator_symbol(Operation.ADDITION) == "+"
        assert operator_symbol(Operation.SUBTRACTION) == "−"
        assert operator_symbol(Operation.MULTIPLICATION) == "×"
        assert operator_symbol(Operation.DIVISION) == "÷"

    def test_labels(self):
        assert label_for_operation(Operation.DIVISION) == "Division"


class TestOperandCount:
    def test_follows_config(self):
        config = _config(operands_per_question=3)
        assert contract_for(Operation.ADDITION).operand_count(config) == 3
        assert contract_for(Operation.MULTIPLICATION).operand_count(config) == 3
        assert contract_for(Operation.DIVISION).operand_count(config) == 3

    def test_subtraction_is_always_binary(self):
        config = _config(operands_per_question=3)
        assert contract_for(Operation.SUBTRACTION).operand_count(config) == 2


class TestAdditionAccept:
    def test_carrying_allowed_accepts_anything(self):
        contract = contract_for(Operation.ADDITION)
        assert contract.accept([27, 45], _config(allow_carrying=True)) == [27, 45]

    def test_rejects_carry(self):
        contract = contract_for(Operation.ADDITION)
        assert contract.accept([27, 45], _config(allow_carrying=False)) is None

    def test_accepts_no_carry(self):
        contract = contract_for(Operation.ADDITION)
        assert contract.accept([23, 45], _config(allow_carrying=False)) == [23, 45]


class TestSubtractionAccept:
    def test_borrowing_allowed_keeps_draw_order(self):
        contract = contract_for(Operation.SUBTRACTION)
        assert contract.accept([32, 57], _config(allow_borrowing=True)) == [32, 57]
        assert contract.compute_answer([32, 57]) == -25

    def test_reorders_larger_first(self):
        contract = contract_for(Operation.SUBTRACTION)
        assert contract.accept([32, 57], _config(allow_borrowing=False)) == [57, 32]

    def test_rejects_borrow(self):
        contract = contract_for(Operation.SUBTRACTION)
        assert contract.accept([37, 52], _config(allow_borrowing=False)) is None

    def test_other_flags_do_not_apply(self):
        config = _config(allow_carrying=False, allow_borrowing=False)
        assert contract_for(Operation.MULTIPLICATION).accept([99, 99], config) == [99, 99]
        assert contract_for(Operation.DIVISION).accept([17, 9], config) == [17, 9]


class TestComputeAnswer:
    def test_each_operation(self):
        assert contract_for(Operation.ADDITION).compute_answer([4, 5, 6]) == 15
        assert contract_for(Operation.SUBTRACTION).compute_answer([9, 4]) == 5
        assert contract_for(Operation.MULTIPLICATION).compute_answer([4, 5, 2]) == 40
        assert contract_for(Operation.DIVISION).compute_answer([9, 2]) == 4
        assert contract_for(Operation.DIVISION).compute_answer([9, 0]) == 9


class TestWordProblemTemplates:
    def test_addition(self):
        text = contract_for(Operation.ADDITION).word_problem([3, 4], "Ava", "Noah", "shells", "finds")
        assert text == "Ava has 3 shells. Noah finds 4 more. How many shells do they have altogether?"

    def test_subtraction(self):
        text = contract_for(Operation.SUBTRACTION).word_problem([9, 4], "Mia", "Liam", "books", "gives")
        assert text == "Mia collected 9 books. They gives 4 to Liam. How many books are left?"

    def test_multiplication(self):
        text = contract_for(Operation.MULTIPLICATION).word_problem([3, 5], "Isla", "Ethan", "apples", "keeps")
        assert "into 3 groups with 5 in each group" in text

    def test_division(self):
        text = contract_for(Operation.DIVISION).word_problem([12, 4], "Lucas", "Mia", "blocks", "shares")
        assert text == (
            "Lucas has 12 blocks and shares them equally with 4 friends. "
            "How many blocks does each person receive?"
        )
