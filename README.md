# sysyfir

An in-memory intermediate representation for a small C-like language.
A `Module` holds types, constants, global variables and functions. Functions
hold basic blocks, and basic blocks hold instructions. The whole module can be
printed as LLVM-style IR text.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building a module

The modules are `sysyfir.module`, `sysyfir.types`, `sysyfir.values`,
`sysyfir.opcodes`, `sysyfir.constants`, `sysyfir.global_variable`,
`sysyfir.function`, `sysyfir.instructions`, `sysyfir.memory` and
`sysyfir.casts`.

```python
from sysyfir.module import Module
from sysyfir.types import FunctionType
from sysyfir.constants import ConstantInt
from sysyfir.function import Function, BasicBlock
from sysyfir.instructions import BinaryInst, ReturnInst

module = Module("example")
i32 = module.int32_type
fn = Function(FunctionType(i32, [i32], module), "inc", module)
entry = BasicBlock(module, "entry", fn)

total = BinaryInst.create_add(fn.arguments[0], ConstantInt(1, module), entry, module)
ReturnInst.create_ret(total, entry)

module.set_print_name()
print(module.print())
```

This prints:

```
define i32 @inc(i32 %arg0) {
entry:
  %op1 = add i32 %arg0, 1
  ret i32 %op1
}
```

`Module.set_print_name` gives every unnamed argument, basic block and
value-producing instruction a name (`argN`, `labelN`, `opN`).

Types are unique per module. `module.pointer_type(t)` and
`module.array_type(t, n)` return the same object for the same arguments, and so
do `PointerType.get` and `ArrayType.get`. Types therefore compare by identity
with `is_eq_type`. The basic types are properties of the module:
`void_type`, `label_type`, `int1_type`, `int32_type`, `float_type`,
`int32_ptr_type` and `float_ptr_type`.

Every operand use is recorded on the value being used. As a result,
`Value.replace_all_use_with` rewrites every instruction that refers to that
value.

### Instructions

- **`sysyfir.instructions`**: `BinaryInst`, `CmpInst`, `FCmpInst`, `CallInst`,
  `BranchInst` and `ReturnInst`.
  - `BranchInst.create_br` and `BranchInst.create_cond_br` also record the
    control-flow edges between blocks.
- **`sysyfir.memory`**: `GetElementPtrInst`, `LoadInst`, `StoreInst`,
  `AllocaInst` and `PhiInst`.
  - A `PhiInst` belongs to a block but is not added to its instruction list.
  - Incoming values are added with `add_incoming(value, pre_bb)`.
  - When printed, predecessors that have no incoming value get
    `[ undef, ... ]`.
- **`sysyfir.casts`**: `ZextInst`, `FpToSiInst` and `SiToFpInst`.
- **`sysyfir.opcodes`**: the `OpID` and `CmpOp` enums.

### Constants

- **`ConstantInt`** wraps values to 32 bits. `ConstantInt.from_bool` makes an
  `i1` constant, which prints as `true` or `false`.
- **`ConstantFloat`** rounds to single precision. It prints as the hexadecimal
  bit pattern of the value widened to a double.
- **`ConstantArray`** and **`ConstantZero`** cover global initialisers.

## Passes

`sysyfir.passes` provides a `Pass` base class and a `PassManager`. The manager
creates passes from their classes and runs them over a module in the order they
were added:

```python
from sysyfir.passes import Pass, PassManager

class CountFunctions(Pass):
    def execute(self):
        self.count = len(self.module.functions)

manager = PassManager(module)
counter = manager.add_pass(CountFunctions)
manager.execute()
```

`sysyfir.cse_order` gives the ordering used to recognise equivalent
expressions in common-subexpression elimination. It provides
`expr_less(a, b)` and a matching `expr_sort_key(inst)`:

- Constants are compared by value, and other operands by identity.
- For the commutative operations (`add`, `mul`, `fadd`, `fmul`), the constant
  operand is ordered before the non-constant one. As a result, `x + 1` and
  `1 + x` compare as the same expression.

## What this package does not do

This package is only the IR and its printer. It does not include:

- a parser for source programs, or a builder that turns syntax trees into IR;
- a command-line compiler;
- ready-made optimisation passes such as dominator trees, promotion of memory
  to registers, liveness analysis or common-subexpression elimination itself.

Only the `Pass` framework and the expression ordering are provided for writing
such passes.