"""Tests for the click CLI."""

import json

import pytest
from click.testing import CliRunner

from namecraft.ai.schemas import SeedWords
from namecraft.cli import cli

from .conftest import FakeGenerationService


@pytest.fixture
def runner():
    return CliRunner()


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_generate(self, runner):
        result = runner.invoke(cli, ['generate', '-k', 'data', '-n', '5', '--min-score', '0'])
        assert result.exit_code == 0
        assert 'Generated 5 names' in result.output

    def test_generate_json_output(self, runner, tmp_path):
        output = tmp_path / 'names.json'
        result = runner.invoke(cli, ['generate', '-k', 'data,cloud', '-n', '3', '--domains', '-o', str(output)])
        assert result.exit_code == 0
        data = json.loads(output.read_text())
        assert len(data) == 3
        assert len(data[0]['domains']) == 9

    def test_invalid_style_exits_with_error(self, runner):
        result = runner.invoke(cli, ['generate', '--style', 'baroque'])
        assert result.exit_code == 1
        assert 'Unknown style' in result.output

    def test_product(self, runner, tmp_path):
        output = tmp_path / 'products.json'
        result = runner.invoke(cli, ['product', '-k', 'data', '-n', '500', '--min-score', '0', '-o', str(output)])
        assert result.exit_code == 0
        assert 'DataHub' in [n['name'] for n in json.loads(output.read_text())]


class TestScoreCommand:
    """Tests for the score command."""

    def test_startup_profile(self, runner):
        result = runner.invoke(cli, ['score', 'DataHub'])
        assert result.exit_code == 0
        assert 'Total Score: 80' in result.output

    def test_product_profile(self, runner):
        result = runner.invoke(cli, ['score', 'DataHub', '--profile', 'product'])
        assert 'Total Score: 95' in result.output


class TestDomainsCommand:
    """Tests for the domains command."""

    def test_domains_json(self, runner, tmp_path):
        output = tmp_path / 'domains.json'
        result = runner.invoke(cli, ['domains', 'DataHub', '-o', str(output)])
        assert result.exit_code == 0
        data = json.loads(output.read_text())
        assert len(data['DataHub']) == 9
        assert data['DataHub'][5]['domain'] == 'getdatahub.com'


class TestStartupCommand:
    """Tests for the AI pipeline command."""

    def test_startup_with_service(self, runner, fake_service, tmp_path):
        output = tmp_path / 'startup.json'
        result = runner.invoke(
            cli, ['startup', 'space tourism', '-n', '10', '--no-domains', '-o', str(output)],
            obj={'service': fake_service},
        )
        assert result.exit_code == 0
        names = [n['name'] for n in json.loads(output.read_text())]
        assert 'Zentrova' in names
        assert fake_service.calls == ['SeedWords', 'CreativeNames']

    def test_service_failure_exits_with_error(self, runner):
        service = FakeGenerationService(failures={SeedWords: RuntimeError('quota exceeded')})
        result = runner.invoke(cli, ['startup', 'space tourism'], obj={'service': service})
        assert result.exit_code == 1
        assert 'quota exceeded' in result.output


class TestTiersCommand:
    """Tests for the tiers command."""

    def test_tiers_for_model(self, runner):
        result = runner.invoke(cli, ['tiers', '-m', 'enterprise'])
        assert result.exit_code == 0
        assert 'Enterprise' in result.output
