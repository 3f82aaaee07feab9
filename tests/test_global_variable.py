import pytest

from sysyfir.constants import ConstantArray, ConstantInt, ConstantZero
from sysyfir.global_variable import GlobalVariable
from sysyfir.module import Module
from sysyfir.types import ArrayType, PointerType
from sysyfir.values import Use, print_as_op


@pytest.fixture
def module():
    return Module("m")


def test_zero_initialised_global(module):
    g = GlobalVariable("g", module, module.int32_type, False, ConstantZero(module.int32_type, module))
    assert g.print() == "@g = global i32 zeroinitializer"
    assert g in module.global_variables


def test_constant_array_global(module):
    arr_ty = ArrayType.get(module.int32_type, 2)
    init = ConstantArray(arr_ty, [ConstantInt(1, module), ConstantInt(2, module)], module)
    c = GlobalVariable("c", module, arr_ty, True, init)
    assert c.print() == "@c = constant [2 x i32] [i32 1, i32 2]"
    assert c.is_const


def test_global_type_is_pointer(module):
    g = GlobalVariable("g", module, module.float_type, False, ConstantZero(module.float_type, module))
    assert g.type is PointerType.get(module.float_type)
    assert g.type.pointer_element_type is module.float_type


def test_initializer_is_operand(module):
    init = ConstantInt(4, module)
    g = GlobalVariable("g", module, module.int32_type, False, init)
    assert g.get_operand(0) is init
    assert g.init is init
    assert init.use_list == [Use(g, 0)]


def test_global_without_initializer(module):
    g = GlobalVariable("g", module, module.int32_type, False)
    assert g.num_operands == 0
    with pytest.raises(ValueError):
        g.print()


def test_global_operand_text(module):
    g = GlobalVariable("g", module, module.int32_type, False, ConstantZero(module.int32_type, module))
    assert print_as_op(g, False) == "@g"
    assert module.print() == g.print() + "\n"