# Copyright 2026 Google Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from absl.testing import absltest
from absl.testing import parameterized

from isaguess.classifier.python import classification
from isaguess.classifier.python import classifier
from isaguess.classifier.python import options

_Isa = options.InstructionSetArchitecture
_OperandWidth = options.OperandWidth
_X86Flavor = options.X86Flavor


class RegisterTest(parameterized.TestCase):

  @parameterized.parameters(
      'ax', 'bx', 'cx', 'dx', 'si', 'di', 'sp', 'bp'
  )
  def test_general_purpose_registers(self, token):
    self.assertTrue(classifier.is_x86_general_purpose_register(token))
    self.assertEqual(classifier.x86_register_width(token), _OperandWidth.WORD)

  @parameterized.parameters('', 'a', 'ex', 'ai', 'ci', 'ap', 'cp', 'axx', 'cs')
  def test_not_general_purpose_registers(self, token):
    self.assertFalse(classifier.is_x86_general_purpose_register(token))

  @parameterized.parameters('cs', 'ds', 'ss')
  def test_segment_registers(self, token):
    self.assertTrue(classifier.is_x86_segment_register(token))
    self.assertEqual(classifier.x86_register_width(token), _OperandWidth.WORD)

  @parameterized.parameters('es', 'fs', 'gs', 'css', 's')
  def test_not_segment_registers(self, token):
    self.assertFalse(classifier.is_x86_segment_register(token))

  @parameterized.parameters(
      ('eax', _OperandWidth.DWORD),
      ('esi', _OperandWidth.DWORD),
      ('ebp', _OperandWidth.DWORD),
      ('rax', _OperandWidth.QWORD),
      ('rdi', _OperandWidth.QWORD),
      ('rsp', _OperandWidth.QWORD),
  )
  def test_wide_registers(self, token, expected_width):
    self.assertEqual(classifier.x86_register_width(token), expected_width)

  @parameterized.parameters(
      '', '%', 'mov', 'al', 'r8', 'ecs', 'rss', 'xax', 'eeax', '%eax', 'st'
  )
  def test_not_registers(self, token):
    self.assertIsNone(classifier.x86_register_width(token))


class CheckArmAndVfpInstructionsTest(absltest.TestCase):

  def test_no_arm_instructions(self):
    result = classification.Classification()
    self.assertFalse(
        classifier.check_arm_and_vfp_instructions(('mov', 'eax'), result)
    )
    self.assertEqual(result, classification.Classification())

  def test_vfp_instruction(self):
    result = classification.Classification()
    self.assertTrue(
        classifier.check_arm_and_vfp_instructions(
            ('vstr', 'd0', 'r0'), result
        )
    )
    self.assertEqual(result.isa, _Isa.ARM)
    self.assertTrue(result.has_vfp_instructions)

  def test_vfp_instruction_after_ldr(self):
    result = classification.Classification()
    self.assertTrue(
        classifier.check_arm_and_vfp_instructions(
            ('ldr', 'r0', 'r1', 'vldr', 'd0', 'r1'), result
        )
    )
    self.assertEqual(result.isa, _Isa.ARM)
    self.assertTrue(result.has_vfp_instructions)

  def test_ldr_without_vfp(self):
    result = classification.Classification()
    self.assertTrue(
        classifier.check_arm_and_vfp_instructions(('str', 'r0', 'r1'), result)
    )
    self.assertEqual(result.isa, _Isa.ARM)
    self.assertFalse(result.has_vfp_instructions)

  def test_mnemonic_must_match_exactly(self):
    result = classification.Classification()
    self.assertFalse(
        classifier.check_arm_and_vfp_instructions(
            ('ldrb', 'strh', 'vldr.f32', 'xvstr'), result
        )
    )
    self.assertEqual(result.isa, _Isa.X86)


class CheckX86RegistersTest(absltest.TestCase):

  def test_intel_registers(self):
    result = classification.Classification()
    classifier.check_x86_registers(('mov', 'eax', 'ebx'), result)
    self.assertEqual(result.x86_flavor, _X86Flavor.INTEL)
    self.assertEqual(result.x86_operand_width, _OperandWidth.DWORD)

  def test_att_registers(self):
    result = classification.Classification()
    classifier.check_x86_registers(('mov', '%ax', '%bx'), result)
    self.assertEqual(result.x86_flavor, _X86Flavor.ATT)
    self.assertEqual(result.x86_operand_width, _OperandWidth.WORD)

  def test_percent_prefix_on_non_register(self):
    result = classification.Classification()
    classifier.check_x86_registers(('%st', '%xmm0', '%'), result)
    self.assertEqual(result.x86_flavor, _X86Flavor.INTEL)
    self.assertEqual(result.x86_operand_width, _OperandWidth.WORD)

  def test_operand_width_never_decreases(self):
    result = classification.Classification()
    classifier.check_x86_registers(('rax', 'eax', 'ax', 'cs'), result)
    self.assertEqual(result.x86_operand_width, _OperandWidth.QWORD)

  def test_stops_at_att_qword_register(self):
    result = classification.Classification()
    classifier.check_x86_registers(('%rax', '%ebx'), result)
    self.assertEqual(result.x86_flavor, _X86Flavor.ATT)
    self.assertEqual(result.x86_operand_width, _OperandWidth.QWORD)

  def test_intel_qword_register_before_att_register(self):
    result = classification.Classification()
    classifier.check_x86_registers(('rax', '%bx'), result)
    self.assertEqual(result.x86_flavor, _X86Flavor.ATT)
    self.assertEqual(result.x86_operand_width, _OperandWidth.QWORD)


class CheckX87InstructionsTest(parameterized.TestCase):

  @parameterized.parameters('finit', 'fld', 'fst')
  def test_x87_instruction(self, mnemonic):
    result = classification.Classification()
    classifier.check_x87_instructions(('mov', 'ax', mnemonic), result)
    self.assertTrue(result.has_x87_instructions)

  def test_no_x87_instruction(self):
    result = classification.Classification()
    classifier.check_x87_instructions(('fldz', 'fstp', 'fadd'), result)
    self.assertFalse(result.has_x87_instructions)


class ClassifyTest(parameterized.TestCase):

  def test_empty(self):
    self.assertEqual(classifier.classify(()), classification.Classification())

  def test_arm_skips_x86_checks(self):
    result = classifier.classify(('ldr', 'rax', '%eax', 'fld'))
    self.assertEqual(
        result, classification.Classification(isa=_Isa.ARM)
    )

  @parameterized.named_parameters(
      (
          'att_dword',
          ('mov', '%eax', '%ebx'),
          classification.Classification(
              x86_flavor=_X86Flavor.ATT,
              x86_operand_width=_OperandWidth.DWORD,
          ),
      ),
      (
          'intel_qword',
          ('mov', 'rax', 'rbx'),
          classification.Classification(
              x86_operand_width=_OperandWidth.QWORD
          ),
      ),
      (
          'x87',
          ('fld', 'st', '0'),
          classification.Classification(has_x87_instructions=True),
      ),
      (
          'att_qword_with_x87',
          ('fst', '%st', 'movq', '%rsp', '%rbp'),
          classification.Classification(
              x86_flavor=_X86Flavor.ATT,
              x86_operand_width=_OperandWidth.QWORD,
              has_x87_instructions=True,
          ),
      ),
  )
  def test_x86(self, tokens, expected):
    self.assertEqual(classifier.classify(tokens), expected)


if __name__ == '__main__':
  absltest.main()
