import pytest

from pattern_demos.demos.simple_factory import Animal, AnimalFactory, Cat, Dog, run
from pattern_demos.domain.exceptions import DomainException, UnsupportedAnimalError


@pytest.fixture
def factory():
    return AnimalFactory()


def test_create_known_animals(factory):
    dog = factory.create_animal("dog")
    cat = factory.create_animal("cat")

    assert isinstance(dog, Dog)
    assert isinstance(cat, Cat)
    assert dog.make_sound() == "Woof!"
    assert cat.make_sound() == "Meow!"


def test_animal_type_is_case_insensitive(factory):
    assert isinstance(factory.create_animal("DoG"), Dog)


def test_unsupported_animal_raises(factory):
    with pytest.raises(UnsupportedAnimalError, match="Animal type not supported") as exc_info:
        factory.create_animal("bird")

    assert exc_info.value.animal_type == "bird"
    assert isinstance(exc_info.value, DomainException)


def test_animal_is_abstract():
    with pytest.raises(TypeError):
        Animal()


def test_run_reports_unsupported_animal(app_config, capsys):
    run(app_config)

    out = capsys.readouterr().out
    assert "Dog says: Woof!" in out
    assert "Cat says: Meow!" in out
    assert "Error: Animal type not supported" in out
