import pytest

from sysyfir.function import BasicBlock, Function
from sysyfir.instructions import BinaryInst, BranchInst, ReturnInst
from sysyfir.constants import ConstantInt
from sysyfir.module import Module
from sysyfir.opcodes import OpID
from sysyfir.types import FunctionType
from sysyfir.values import Use


@pytest.fixture
def module():
    return Module("m")


def make_function(module, name="f", params=2):
    ty = FunctionType(module.int32_type, [module.int32_type] * params, module)
    return Function(ty, name, module)


def test_arguments_follow_signature(module):
    f = make_function(module)
    assert [a.arg_no for a in f.arguments] == [0, 1]
    assert all(a.type is module.int32_type for a in f.arguments)
    assert all(a.parent is f for a in f.arguments)
    assert f.num_of_args == 2
    assert f.return_type is module.int32_type
    assert module.functions == [f]


def test_declaration_print(module):
    f = make_function(module)
    assert f.is_declaration() is True
    assert f.entry_block is None
    assert f.print() == "declare i32 @f(i32, i32)\n"


def test_blocks_register_with_function(module):
    f = make_function(module)
    bb = BasicBlock(module, "entry", f)
    assert f.basic_blocks == [bb]
    assert f.entry_block is bb
    assert f.num_basic_blocks == 1
    assert bb.module is module
    assert f.is_declaration() is False


def test_set_instr_name_numbers_in_order(module):
    f = make_function(module)
    bb = BasicBlock(module, "", f)
    f.set_instr_name()
    assert [a.name for a in f.arguments] + [bb.name] == ["arg0", "arg1", "label2"]


def test_set_instr_name_keeps_names_and_continues(module):
    f = make_function(module)
    entry = BasicBlock(module, "entry", f)
    f.set_instr_name()
    assert entry.name == "entry"
    later = BasicBlock(module, "", f)
    f.set_instr_name()
    assert later.name == "label2"
    assert [a.name for a in f.arguments] == ["arg0", "arg1"]


def test_argument_print(module):
    f = make_function(module)
    f.set_instr_name()
    assert f.arguments[0].print() == "i32 %arg0"


def test_terminator(module):
    f = make_function(module)
    bb = BasicBlock(module, "entry", f)
    assert bb.terminator is None
    BinaryInst.create_add(*f.arguments, bb, module)
    assert bb.terminator is None
    ret = ReturnInst.create_void_ret(bb)
    assert bb.terminator is ret


def test_find_and_insert(module):
    f = make_function(module)
    bb = BasicBlock(module, "entry", f)
    a0, a1 = f.arguments
    first = BinaryInst.create_add(a0, a1, bb, module)
    last = BinaryInst.create_sub(a0, a1, bb, module)
    middle = BinaryInst(module.int32_type, OpID.mul, a0, a1, None)
    bb.insert_instruction(1, middle)
    assert bb.instructions == [first, middle, last]
    assert bb.find_instruction(middle) == 1
    front = BinaryInst(module.int32_type, OpID.sdiv, a0, a1, None)
    bb.add_instr_begin(front)
    assert bb.find_instruction(front) == 0
    stray = BinaryInst(module.int32_type, OpID.srem, a0, a1, None)
    with pytest.raises(ValueError):
        bb.find_instruction(stray)


def test_delete_instr_drops_uses(module):
    f = make_function(module)
    bb = BasicBlock(module, "entry", f)
    a0, a1 = f.arguments
    add = BinaryInst.create_add(a0, a1, bb, module)
    assert a0.use_list == [Use(add, 0)]
    assert a1.use_list == [Use(add, 1)]
    bb.delete_instr(add)
    assert add not in bb.instructions
    assert a0.use_list == []
    assert a1.use_list == []


def test_branch_links_and_erase(module):
    f = make_function(module)
    a = BasicBlock(module, "a", f)
    b = BasicBlock(module, "b", f)
    BranchInst.create_br(b, a)
    assert b.pre_basic_blocks == [a]
    assert a.succ_basic_blocks == [b]
    b.erase_from_parent()
    assert f.basic_blocks == [a]
    assert a.succ_basic_blocks == []


def test_block_print_lists_predecessors(module):
    f = make_function(module)
    p1 = BasicBlock(module, "", f)
    p2 = BasicBlock(module, "", f)
    target = BasicBlock(module, "", f)
    BranchInst.create_br(target, p1)
    BranchInst.create_br(target, p2)
    module.set_print_name()
    first_line = target.print().splitlines()[0]
    assert first_line.startswith(f"{target.name}:")
    assert first_line.endswith(f"; preds = {p1.as_operand()}, {p2.as_operand()}")


def test_block_without_parent_print(module):
    bb = BasicBlock(module, "lonely")
    assert bb.print() == "lonely:\n; Error: Block without parent!\n"


def test_define_print(module):
    f = make_function(module)
    bb = BasicBlock(module, "entry", f)
    ReturnInst.create_ret(ConstantInt(0, module), bb)
    text = f.print()
    assert text.startswith("define i32 @f(i32 %arg0, i32 %arg1) {\nentry:\n")
    assert text.endswith("}")
    assert "  ret i32 0\n" in text