import math

import pytest

from numlab.shapes import Circle, Rectangle, Shape


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape()


def test_circle_area_and_name():
    circle = Circle(1.0)
    assert circle.name == "Circle"
    assert circle.area() == pytest.approx(math.pi)


def test_circle_area_scales_with_square_of_radius():
    assert Circle(3.0).area() == pytest.approx(9 * Circle(1.0).area())


def test_rectangle_area_and_name():
    rect = Rectangle(2.5, 0.2)
    assert rect.name == "Rectangle"
    assert rect.area() == pytest.approx(0.5)


def test_rectangle_area_is_symmetric():
    assert Rectangle(4.0, 7.0).area() == Rectangle(7.0, 4.0).area()


def test_polymorphic_collection():
    shapes = [Circle(1.0), Rectangle(2.5, 0.2)]
    assert [s.name for s in shapes] == ["Circle", "Rectangle"]
    assert all(isinstance(s, Shape) for s in shapes)
    assert str(shapes[0]).startswith("I am a Circle, my area is: ")


def test_shapes_are_immutable():
    circle = Circle(2.0)
    with pytest.raises(AttributeError):
        circle.radius = 5.0
    assert circle.area() == pytest.approx(4 * math.pi)